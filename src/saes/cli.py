"""
Command-line interface for simplified AES-128.

Usage:
    saes demo
    saes encrypt --key-text 1234567890abcdef --text "hello world12345" --verbose
    saes decrypt --key <hex32> --ct <hex32> --trace trace.jsonl
    saes schedule --key-text 1234567890abcdef
    saes compare --key <hex32> --pt <hex32>
"""

from __future__ import annotations

import sys
from typing import Callable, TextIO

import click
from tabulate import tabulate

from . import DEFAULT_KEY_TEXT, DEFAULT_PT_TEXT, __version__
from .cipher import SimplifiedAES128
from .config import RunConfig
from .key_schedule import round_key, round_key_bytes
from .reference import aes128_decrypt, aes128_encrypt, differing_bits
from .tables import NR
from .trace import TraceRecorder, print_header, print_result
from .utils import bytes_to_hex, bytes_to_state, format_hex_rows, format_state_grid


def _key_options(func: Callable) -> Callable:
    func = click.option(
        "--key-text",
        type=str,
        default=None,
        help="Key as 16 ASCII characters",
    )(func)
    func = click.option(
        "--key",
        "key_hex",
        type=str,
        default=None,
        help="Key as 32 hex chars",
    )(func)
    return func


def _trace_options(func: Callable) -> Callable:
    func = click.option(
        "--trace",
        "trace_path",
        metavar="FILE",
        default=None,
        help="Write a JSON Lines trace of every round operation to FILE",
    )(func)
    func = click.option(
        "--verbose", "-v",
        is_flag=True,
        help="Print the state after every round operation",
    )(func)
    return func


def _build_config(**kwargs) -> RunConfig:
    try:
        return RunConfig.from_inputs(**kwargs)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _run(config: RunConfig, direction: str) -> bytes:
    """Run one encrypt or decrypt with tracing set up from config."""
    trace_file: TextIO | None = None
    if config.trace_path:
        try:
            trace_file = open(config.trace_path, "w")
        except OSError as e:
            click.echo(f"Error: Cannot open trace file: {e}", err=True)
            sys.exit(1)

    tracer = None
    if config.verbose or trace_file:
        tracer = TraceRecorder(verbose=config.verbose, trace_file=trace_file)

    try:
        engine = SimplifiedAES128(config.key, tracer=tracer)
        if direction == "encrypt":
            return engine.encrypt(config.data)
        return engine.decrypt(config.data)
    finally:
        if trace_file:
            trace_file.close()


@click.group()
@click.version_option(version=__version__, prog_name="saes")
def main() -> None:
    """Simplified AES-128: a didactic, reduced-strength block cipher.

    Processes exactly one 16-byte block under a 16-byte key. Not secure.
    """
    pass


@main.command()
@click.option("--key-text", default=DEFAULT_KEY_TEXT, show_default=True,
              help="Key as 16 ASCII characters")
@click.option("--text", default=DEFAULT_PT_TEXT, show_default=True,
              help="Plaintext as 16 ASCII characters")
def demo(key_text: str, text: str) -> None:
    """Encrypt and decrypt a sample string, printing hex in rows of 4."""
    config = _build_config(key_text=key_text, data_text=text)
    engine = SimplifiedAES128(config.key)

    encrypted = engine.encrypt(config.data)
    click.echo("Encrypted ciphertext:")
    click.echo(format_hex_rows(encrypted))

    decrypted = engine.decrypt(encrypted)
    click.echo("Decrypted plaintext:")
    click.echo(format_hex_rows(decrypted))

    click.echo("")
    click.echo(f"Decrypted text: {decrypted.decode('utf-8', errors='replace')}")


@main.command()
@_key_options
@click.option("--pt", "pt_hex", default=None, help="Plaintext as 32 hex chars")
@click.option("--text", default=None, help="Plaintext as 16 ASCII characters")
@_trace_options
def encrypt(
    key_hex: str | None,
    key_text: str | None,
    pt_hex: str | None,
    text: str | None,
    verbose: bool,
    trace_path: str | None,
) -> None:
    """Encrypt one block."""
    config = _build_config(
        key_hex=key_hex, key_text=key_text,
        data_hex=pt_hex, data_text=text,
        verbose=verbose, trace_path=trace_path,
    )
    if verbose:
        print_header("Simplified AES-128 Encryption")
        click.echo(f"Key:       {bytes_to_hex(config.key)}")
        click.echo(f"Plaintext: {bytes_to_hex(config.data)}")
        click.echo(format_state_grid(bytes_to_state(config.data)))

    ciphertext = _run(config, "encrypt")

    if verbose:
        click.echo("Output state:")
        click.echo(format_state_grid(bytes_to_state(ciphertext)))
        check = SimplifiedAES128(config.key).decrypt(ciphertext) == config.data
        print_result("Ciphertext", bytes_to_hex(ciphertext), check)
    else:
        click.echo(bytes_to_hex(ciphertext))


@main.command()
@_key_options
@click.option("--ct", "ct_hex", required=True, help="Ciphertext as 32 hex chars")
@click.option("--as-text", is_flag=True, help="Also print the plaintext decoded as text")
@_trace_options
def decrypt(
    key_hex: str | None,
    key_text: str | None,
    ct_hex: str,
    as_text: bool,
    verbose: bool,
    trace_path: str | None,
) -> None:
    """Decrypt one block."""
    config = _build_config(
        key_hex=key_hex, key_text=key_text, data_hex=ct_hex,
        verbose=verbose, trace_path=trace_path,
    )
    if verbose:
        print_header("Simplified AES-128 Decryption")
        click.echo(f"Key:        {bytes_to_hex(config.key)}")
        click.echo(f"Ciphertext: {bytes_to_hex(config.data)}")
        click.echo(format_state_grid(bytes_to_state(config.data)))

    plaintext = _run(config, "decrypt")

    if verbose:
        click.echo("Output state:")
        click.echo(format_state_grid(bytes_to_state(plaintext)))
        print_result("Plaintext", bytes_to_hex(plaintext))
    else:
        click.echo(bytes_to_hex(plaintext))

    if as_text:
        click.echo(plaintext.decode("utf-8", errors="replace"))


@main.command()
@_key_options
def schedule(key_hex: str | None, key_text: str | None) -> None:
    """Print the 11 round keys derived from a key."""
    # Any 16-byte placeholder satisfies the data check
    config = _build_config(key_hex=key_hex, key_text=key_text, data_hex="00" * 16)
    words = SimplifiedAES128(config.key).schedule

    rows = []
    for r in range(NR + 1):
        rk = round_key(words, r)
        rows.append([r, *(w.hex() for w in rk), round_key_bytes(words, r).hex()])

    headers = ["Round", "w[4r]", "w[4r+1]", "w[4r+2]", "w[4r+3]", "Round key"]
    click.echo(tabulate(rows, headers=headers, tablefmt="simple"))


@main.command()
@_key_options
@click.option("--pt", "pt_hex", default=None, help="Plaintext as 32 hex chars")
@click.option("--text", default=None, help="Plaintext as 16 ASCII characters")
def compare(
    key_hex: str | None,
    key_text: str | None,
    pt_hex: str | None,
    text: str | None,
) -> None:
    """Compare the simplified cipher with standard AES-128 (FIPS-197)."""
    if key_hex is None and key_text is None:
        key_text = DEFAULT_KEY_TEXT
    if pt_hex is None and text is None:
        text = DEFAULT_PT_TEXT
    config = _build_config(
        key_hex=key_hex, key_text=key_text, data_hex=pt_hex, data_text=text,
    )

    engine = SimplifiedAES128(config.key)
    simplified = engine.encrypt(config.data)
    standard = aes128_encrypt(config.key, config.data)

    rows = [
        ["simplified", bytes_to_hex(simplified),
         "yes" if engine.decrypt(simplified) == config.data else "no"],
        ["AES-128", bytes_to_hex(standard),
         "yes" if aes128_decrypt(config.key, standard) == config.data else "no"],
    ]
    click.echo(tabulate(rows, headers=["Cipher", "Ciphertext", "Round trip"], tablefmt="simple"))
    click.echo("")
    click.echo(f"Differing bits: {differing_bits(simplified, standard)} / 128")


if __name__ == "__main__":
    main()
