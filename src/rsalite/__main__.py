"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that prompts for any value missing from
the command line, unless running non-interactively, in which case declared defaults are used or the run fails.

Typical usage example:

    rsalite keygen --max 10000
    OR
    python -m rsalite sign --message 42 --modulus 3233 --exponent 2753
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import sys
import typing

import rsalite


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in RSA Lite.",
            choices=["prime", "keygen", "sign", "decode", "verify"],
        ),
    "prime":
        HelpData("Random prime generation utility."),
    "keygen":
        HelpData("Key pair generation utility."),
    "sign":
        HelpData("Signing utility."),
    "decode":
        HelpData("Signature decoding utility."),
    "verify":
        HelpData("Signature verification utility."),
    "prime_max":
        HelpData(
            description="Inclusive upper bound of the prime.",
            format=int,
            default=1844674407370955,
        ),
    "key_max":
        HelpData(
            description="Inclusive upper bound of both primes of the key pair.",
            format=int,
            default=10000,
        ),
    "message":
        HelpData(
            description="The integer message. Should be below the modulus.",
            format=int,
        ),
    "signature":
        HelpData(
            description="The integer signature.",
            format=int,
        ),
    "modulus":
        HelpData(
            description="Modulus (n) of the key.",
            format=int,
        ),
    "exponent":
        HelpData(
            description="Exponent of the key, private (d) for signing or public (e) for decoding and verification.",
            format=int,
        ),
}

needs = {
    "prime": ("prime_max",),
    "keygen": ("key_max",),
    "sign": ("message", "modulus", "exponent"),
    "decode": ("signature", "modulus", "exponent"),
    "verify": ("message", "signature", "modulus", "exponent"),
}

keyparts = argparse.ArgumentParser(add_help=False)
keyparts.add_argument("--modulus", "-n", type=help_dict["modulus"].format, help=help_dict["modulus"].description)
keyparts.add_argument("--exponent", "-x", type=help_dict["exponent"].format, help=help_dict["exponent"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
sigs = argparse.ArgumentParser(add_help=False)
sigs.add_argument("--signature", "-S", type=help_dict["signature"].format, help=help_dict["signature"].description)
corep = argparse.ArgumentParser(prog="rsalite")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsalite.__version__}")
corep.add_argument("--non-interactive", "-N", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--verbose", "-V", action="store_true", help="Log engine internals to stderr")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

prime = commands.add_parser("prime", help=help_dict["prime"].description)
prime.add_argument("--max", dest="prime_max", type=int, help=help_dict["prime_max"].description)
keygen = commands.add_parser("keygen", help=help_dict["keygen"].description)
keygen.add_argument("--max", dest="key_max", type=int, help=help_dict["key_max"].description)
sign = commands.add_parser("sign", parents=[payloads, keyparts], help=help_dict["sign"].description)
decode = commands.add_parser("decode", parents=[sigs, keyparts], help=help_dict["decode"].description)
verify = commands.add_parser("verify", parents=[payloads, sigs, keyparts], help=help_dict["verify"].description)


def checkmodes(arg: str, non_interactive: bool):
    helper_data = help_dict[arg]
    if non_interactive and helper_data.default is not None:
        return helper_data.default
    if non_interactive:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print):
    helper_data = checkmodes(arg, non_interactive)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    vald = set(helper_data.choices)
    for choice in helper_data.choices:
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}")
        else:
            prntr(choice)
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        prntr("Please select an option from the list.")


def input_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print):
    helper_data = checkmodes(arg, non_interactive)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def fail(text: str) -> typing.NoReturn:
    """Report a failed operation and exit with an error status."""
    print(text, file=sys.stderr)
    sys.exit(1)


def execute(args: argparse.Namespace, pspr: typing.Callable) -> None:
    """Run the selected subcommand against the engine."""
    match args.subcommand:
        case "prime":
            p = rsalite.generate_random_prime(args.prime_max)
            if p is None:
                fail("Failed to generate a prime.")
            pspr("Prime:")
            print(p)
        case "keygen":
            kp = rsalite.KeyPair.generate(args.key_max)
            if kp is None:
                fail("Failed to generate the RSA key pair.")
            pspr("Public key (n, e):")
            print(f"{kp.pub.mod} {kp.pub.expo}")
            pspr("Private key (n, d):")
            print(f"{kp.priv.mod} {kp.priv.expo}")
        case "sign":
            signature = rsalite.sign(args.message, (args.modulus, args.exponent))
            pspr("Signature:")
            print(signature)
        case "decode":
            message = rsalite.decode(args.signature, (args.modulus, args.exponent))
            pspr("Decoded message:")
            print(message)
        case "verify":
            if rsalite.verify(args.message, args.signature, (args.modulus, args.exponent)):
                pspr("Signature Verified!")
            else:
                fail("Signature Verification Failed!")


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not args.non_interactive:
            print(text)

    pspr("Welcome to RSA Lite!\n")
    try:
        if not args.subcommand:
            args.subcommand = choice_handler("subcommand", args.non_interactive)
        for reqs in needs[args.subcommand]:
            if getattr(args, reqs, None) is None:
                res = input_handler(reqs, args.non_interactive)
                setattr(args, reqs, res)
            else:
                pspr(f"{reqs}: {getattr(args, reqs)}")
    except OSError as err:
        fail(str(err))
    pspr("\nInput Complete! Executing...")
    try:
        execute(args, pspr)
    except ValueError as err:
        fail(f"Invalid input: {err}")
    pspr("Thank you for using RSA Lite!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
