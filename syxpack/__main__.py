import argparse
import logging
import sys
from binascii import unhexlify

from syxpack.errors import SysExError
from syxpack.hexdump import HexDump, HexDumpConfig, Include
from syxpack.manufacturer import Manufacturer
from syxpack.message import Message, split_messages

logger = logging.getLogger("syxpack")


def get_hexdump_config(args) -> HexDumpConfig:
    include = Include.NONE
    if not args.no_offset:
        include |= Include.OFFSET
    if not args.no_chars:
        include |= Include.PRINTABLE
    if args.gap:
        include |= Include.MIDDLE_GAP
    return HexDumpConfig(
        bytes_per_line=args.bytes_per_line,
        uppercase=not args.lowercase,
        include=include,
    )


def dump_file(args) -> int:
    config = get_hexdump_config(args)
    data = args.file.read()

    try:
        buffers = split_messages(data)
    except SysExError as err:
        print(f"{args.file.name}: {err}", file=sys.stderr)
        return 1

    failed = 0
    for i, buf in enumerate(buffers):
        if i:
            print()
        print(f"Message {i + 1}/{len(buffers)}, {len(buf)} bytes")
        try:
            msg = Message.parse(buf)
        except SysExError as err:
            logger.info(f"Cannot parse message {i + 1}: {err}")
            print(f"Invalid message: {err}")
            failed += 1
            continue

        print(msg)
        if msg.payload:
            print(HexDump(msg.payload, config))

    return 1 if failed else 0


def show_manufacturer(args) -> int:
    try:
        identifier = unhexlify("".join(args.identifier).replace(" ", ""))
        print(Manufacturer(identifier))
    except (ValueError, SysExError) as err:
        print(f"Invalid manufacturer identifier: {err}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    elif args.info:
        logging.basicConfig(level=logging.INFO)

    if hasattr(args, "func"):
        return args.func(args)

    parser.print_usage()
    return 0


parser = argparse.ArgumentParser(
    "syxpack",
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)

parser.add_argument("-I", "--info", action="store_true", help="Enable info logging")
parser.add_argument("-D", "--debug", action="store_true", help="Enable debug logging")
subparsers = parser.add_subparsers()


parser_dump = subparsers.add_parser("dump", help="Describe the messages of a .syx file")
parser_dump.set_defaults(func=dump_file)
parser_dump.add_argument("file", type=argparse.FileType("rb"), help="File to dump")
parser_dump.add_argument(
    "-w",
    "--bytes-per-line",
    type=int,
    default=16,
    help="Number of payload bytes per line (0 for a single line)",
)
parser_dump.add_argument(
    "--lowercase",
    action="store_true",
    help="Print hex digits in lowercase",
)
parser_dump.add_argument(
    "--no-offset",
    action="store_true",
    help="Do not print the offset column",
)
parser_dump.add_argument(
    "--no-chars",
    action="store_true",
    help="Do not print the printable characters column",
)
parser_dump.add_argument(
    "--gap",
    action="store_true",
    help="Add a gap in the middle of each line",
)


parser_manufacturer = subparsers.add_parser(
    "manufacturer",
    help="Identify a manufacturer from its hex ID",
)
parser_manufacturer.set_defaults(func=show_manufacturer)
parser_manufacturer.add_argument(
    "identifier",
    nargs="+",
    help="Manufacturer ID in hex, like 41 or 00 20 29",
)

if __name__ == "__main__":
    sys.exit(main())
