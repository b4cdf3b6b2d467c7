"""
Command-line interface for the AES-128 mode toolkit.

Usage:
    aes-modes encrypt --mode ecb --key <hex32> <data-hex> [--pad] [--verbose]
    aes-modes decrypt --mode cbc --key <hex32> --iv <hex32> <data-hex>
    aes-modes decrypt --key <hex32> --base64-file data.txt --text
    aes-modes validate --n 100 --seed 1
    aes-modes oracle --n 1000 --seed 42
    aes-modes xor <hex> <hex>
    aes-modes break-xor data.txt
"""

from __future__ import annotations

import sys

import click

from . import DEFAULT_KEY_HEX, DEFAULT_PT_HEX, __version__
from .cipher import BlockCipher
from .files import break_xor_file, decrypt_base64_file
from .generator import generate_samples, repeated_block_plaintext
from .golden import (
    FIPS_197_TEST_VECTORS,
    golden_cbc_encrypt,
    golden_decrypt,
    golden_ecb_encrypt,
)
from .modes import CBCMode, ECBMode, Mode, list_modes
from .oracle import classify, score
from .padding import pkcs7_pad
from .randomness import RandomSource
from .trace import TraceRecorder, print_header, print_result
from .utils import (
    BLOCK_SIZE,
    bytes_to_hex,
    bytes_to_state,
    format_blocks,
    format_state_grid,
    hex_to_bytes,
)
from .xor import fixed_xor

MODE_CHOICE = click.Choice([m.value for m in Mode], case_sensitive=False)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _build_mode(mode: str, key_hex: str, iv_hex: str | None, tracer: TraceRecorder | None):
    key = hex_to_bytes(key_hex)
    cipher = BlockCipher(key, tracer=tracer)
    if Mode(mode.lower()) is Mode.CBC:
        if iv_hex is None:
            _fail("--iv is required for CBC mode")
        return key, CBCMode(cipher, hex_to_bytes(iv_hex))
    return key, ECBMode(cipher)


@click.group()
@click.version_option(version=__version__, prog_name="aes-modes")
def main() -> None:
    """AES-128 with ECB/CBC modes and an ECB/CBC detection oracle.

    Inputs and outputs are hex strings unless a file or --text is given.
    """
    pass


@main.command(name="list-modes")
def list_modes_cmd() -> None:
    """List available block modes."""
    click.echo("Available modes:")
    click.echo("")
    for mode in list_modes():
        click.echo(f"  {mode['name']}")
        click.echo(f"    {mode['description']}")
        click.echo("")


@main.command()
@click.argument("data_hex", default=DEFAULT_PT_HEX)
@click.option("--mode", type=MODE_CHOICE, default="ecb", help="Block mode (default: ecb)")
@click.option("--key", "key_hex", default=DEFAULT_KEY_HEX, help="32 hex chars (default: FIPS-197 key)")
@click.option("--iv", "iv_hex", default=None, help="32 hex chars, CBC only")
@click.option("--pad", is_flag=True, help="Apply PKCS#7 padding before encrypting")
@click.option("--verbose", "-v", is_flag=True, help="Print every round operation")
@click.option("--trace", "trace_path", type=click.Path(dir_okay=False), default=None,
              help="Write a JSON Lines trace to this file")
def encrypt(
    data_hex: str,
    mode: str,
    key_hex: str,
    iv_hex: str | None,
    pad: bool,
    verbose: bool,
    trace_path: str | None,
) -> None:
    """Encrypt DATA_HEX (default: FIPS-197 plaintext)."""
    trace_file = None
    try:
        data = hex_to_bytes(data_hex)
        if pad:
            data = pkcs7_pad(data)

        if trace_path:
            trace_file = open(trace_path, "w")
        tracer = TraceRecorder(verbose=verbose, trace_file=trace_file) if (verbose or trace_file) else None

        if verbose:
            print_header(f"AES-128 {mode.upper()} encrypt")
            click.echo(f"Key:   {key_hex}")
            click.echo(f"Input: {bytes_to_hex(data)}")
            if len(data) >= BLOCK_SIZE:
                click.echo("First block state:")
                click.echo(format_state_grid(bytes_to_state(data[:BLOCK_SIZE])))

        key, ctx = _build_mode(mode, key_hex, iv_hex, tracer)
        iv = ctx.iv if isinstance(ctx, CBCMode) else None
        ciphertext = ctx.encrypt(data)
    except (ValueError, OSError) as e:
        _fail(str(e))
    finally:
        if trace_file:
            trace_file.close()

    if verbose:
        click.echo("Ciphertext blocks:")
        click.echo(format_blocks(ciphertext))
        if iv is None:
            expected = golden_ecb_encrypt(key, data)
        else:
            expected = golden_cbc_encrypt(key, iv, data)
        print_result(bytes_to_hex(ciphertext), len(data) // BLOCK_SIZE, ciphertext == expected)
    else:
        click.echo(bytes_to_hex(ciphertext))


@main.command()
@click.argument("data_hex", required=False)
@click.option("--mode", type=MODE_CHOICE, default="ecb", help="Block mode (default: ecb)")
@click.option("--key", "key_hex", default=DEFAULT_KEY_HEX, help="32 hex chars (default: FIPS-197 key)")
@click.option("--iv", "iv_hex", default=None, help="32 hex chars, CBC only")
@click.option("--base64-file", "base64_path", type=click.Path(dir_okay=False), default=None,
              help="Read base64 ciphertext from this file instead of DATA_HEX")
@click.option("--text", "as_text", is_flag=True, help="Print the plaintext as text rather than hex")
def decrypt(
    data_hex: str | None,
    mode: str,
    key_hex: str,
    iv_hex: str | None,
    base64_path: str | None,
    as_text: bool,
) -> None:
    """Decrypt DATA_HEX or a base64 file. Padding, if any, is left in place."""
    if (data_hex is None) == (base64_path is None):
        _fail("Give either DATA_HEX or --base64-file")
    try:
        if base64_path is not None:
            iv = hex_to_bytes(iv_hex) if iv_hex is not None else None
            plaintext = decrypt_base64_file(base64_path, hex_to_bytes(key_hex), mode.lower(), iv)
        else:
            _, ctx = _build_mode(mode, key_hex, iv_hex, None)
            plaintext = ctx.decrypt(hex_to_bytes(data_hex))
    except (ValueError, OSError) as e:
        _fail(str(e))
    if as_text:
        click.echo(plaintext.decode("utf-8", errors="replace"))
    else:
        click.echo(bytes_to_hex(plaintext))


@main.command()
@click.argument("left_hex")
@click.argument("right_hex")
def xor(left_hex: str, right_hex: str) -> None:
    """XOR two equal-length hex buffers."""
    try:
        result = fixed_xor(hex_to_bytes(left_hex), hex_to_bytes(right_hex))
    except ValueError as e:
        _fail(str(e))
    click.echo(bytes_to_hex(result))


@main.command(name="break-xor")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--key-size", type=int, default=None, help="Key length, if known (default: estimate it)")
def break_xor(path: str, key_size: int | None) -> None:
    """Recover the key of a base64 repeating-key XOR file and print the plaintext."""
    try:
        key, plaintext = break_xor_file(path, key_size)
    except (ValueError, OSError) as e:
        _fail(str(e))
    click.echo(f"Key size: {len(key)}")
    click.echo(f"Key: {key.hex()} ({key.decode('latin-1')!r})")
    click.echo("")
    click.echo(plaintext.decode("utf-8", errors="replace"))


@main.command()
@click.option("--n", "num_tests", type=int, default=100, help="Number of random test vectors (default: 100)")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
def validate(num_tests: int, seed: int | None, verbose: bool) -> None:
    """Validate the cipher against FIPS-197 vectors and PyCryptodome."""
    rng = RandomSource(seed=seed)

    click.echo("Running FIPS-197 KAT tests...")
    fips_passed = 0
    for i, vec in enumerate(FIPS_197_TEST_VECTORS):
        cipher = BlockCipher(vec["key"])
        ct = cipher.encrypt_block(vec["plaintext"])
        ok = (
            ct == vec["ciphertext"]
            and cipher.decrypt_block(ct) == golden_decrypt(vec["key"], ct) == vec["plaintext"]
        )
        if ok:
            fips_passed += 1
            if verbose:
                click.echo(f"  FIPS test {i+1}: PASS")
        else:
            click.echo(f"  FIPS test {i+1}: FAIL - expected {vec['ciphertext'].hex()}, got {ct.hex()}")
    click.echo(f"FIPS-197 tests: {fips_passed}/{len(FIPS_197_TEST_VECTORS)} passed")

    click.echo(f"\nRunning {num_tests} random ECB/CBC tests...")
    random_passed = 0
    for i in range(num_tests):
        key = rng.get_bytes(16, "key")
        iv = rng.get_bytes(BLOCK_SIZE, "iv")
        data = rng.get_bytes(BLOCK_SIZE * rng.randint(1, 4), "other")
        cipher = BlockCipher(key)

        ecb_ok = ECBMode(cipher).encrypt(data) == golden_ecb_encrypt(key, data)
        cbc_ct = CBCMode(cipher, iv).encrypt(data)
        cbc_ok = cbc_ct == golden_cbc_encrypt(key, iv, data)
        roundtrip_ok = CBCMode(cipher, iv).decrypt(cbc_ct) == data

        if ecb_ok and cbc_ok and roundtrip_ok:
            random_passed += 1
        elif verbose:
            click.echo(f"  Random test {i+1}: FAIL - ecb={ecb_ok} cbc={cbc_ok} roundtrip={roundtrip_ok}")
    click.echo(f"Random tests: {random_passed}/{num_tests} passed")

    total_passed = fips_passed + random_passed
    total_tests = len(FIPS_197_TEST_VECTORS) + num_tests

    click.echo("")
    if total_passed == total_tests:
        click.echo(f"VALIDATION PASSED: All {total_tests} tests passed")
        sys.exit(0)
    else:
        click.echo(f"VALIDATION FAILED: {total_tests - total_passed} failures")
        sys.exit(1)


@main.command()
@click.option("--n", "num_samples", type=int, default=1000, help="Number of samples (default: 1000)")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--text", default="", help="Message embedded before the repeated run")
def oracle(num_samples: int, seed: int | None, text: str) -> None:
    """Generate random ECB/CBC ciphertexts and score the detection oracle."""
    rng = RandomSource(seed=seed)
    plaintext = repeated_block_plaintext(text.encode())
    samples = generate_samples(plaintext, num_samples, rng)

    predictions = classify(s.ciphertext for s in samples)
    report = score(predictions, [s.mode for s in samples])

    click.echo(f"Samples: {num_samples}  seed={seed if seed is not None else 'random'}")
    for mode in Mode:
        total = report.total[mode.value]
        correct = report.correct[mode.value]
        click.echo(f"  {mode}: {correct}/{total} correct ({report.accuracy(mode):.1%})")
    click.echo(f"Overall accuracy: {report.accuracy():.1%}")

    if report.correct[Mode.ECB.value] != report.total[Mode.ECB.value]:
        click.echo("ORACLE FAILED: missed ECB samples")
        sys.exit(1)


if __name__ == "__main__":
    main()
