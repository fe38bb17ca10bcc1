import argparse
import asyncio
import sys

from .client.merge import check_command, check_command_async, merge_command, merge_command_async
from .client.split import split_command, split_command_async


def build_parser():
    parser = argparse.ArgumentParser(prog="partsplit", description="Split a file into parts and merge them back.")
    parser.add_argument("--async", dest="use_async", action="store_true", help="Run the non-blocking form")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("split", help="Split a file into part_N files")
    p.add_argument("in_file")
    p.add_argument("out_dir", nargs="?", help="Defaults to <file>.parts")
    p.add_argument("--chunk-size", type=int, help="Bytes per part")
    p.add_argument("--buffer-size", type=int, help="Streaming buffer size in bytes")

    p = sub.add_parser("merge", help="Merge part_N files into one file")
    p.add_argument("in_dir")
    p.add_argument("out_file")
    p.add_argument("--buffer-size", type=int, help="Streaming buffer size in bytes")

    p = sub.add_parser("check", help="Check a part set for missing parts and total size")
    p.add_argument("in_dir")
    p.add_argument("--total-size", type=int, required=True)
    p.add_argument("--part-count", type=int, required=True)

    return parser


def run(args):
    if args.command == "split":
        if args.use_async:
            return asyncio.run(split_command_async(args.in_file, args.out_dir, args.chunk_size, args.buffer_size))
        return split_command(args.in_file, args.out_dir, args.chunk_size, args.buffer_size)

    if args.command == "merge":
        if args.use_async:
            return asyncio.run(merge_command_async(args.in_dir, args.out_file, args.buffer_size))
        return merge_command(args.in_dir, args.out_file, args.buffer_size)

    if args.use_async:
        return asyncio.run(check_command_async(args.in_dir, args.total_size, args.part_count))
    return check_command(args.in_dir, args.total_size, args.part_count)


def main(argv=None):
    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
