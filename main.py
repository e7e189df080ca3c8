import sys

from rich.pretty import pprint

from argtree import *

args = parser("usage: main [options...] <command> [params...]", colorful=True)
args.add_switch("v", "verbose", "Talk more while working")


@args.command("copy <src> <dst>", "Copy a file to another place")
def copy(node):
    src, dst = node.params
    pprint({"src": src, "dst": dst, "force": node.has("force")})
    return 0


copy.add_switch("f", "force", "Overwrite the destination")


# Everything after "exec" is left for the program being run.
@args.command("exec", "Run a program with the remaining arguments", ignore_after=True)
def run(node):
    pprint(sys.argv[args.end:])
    return 0


if __name__ == '__main__':
    if args.parse():
        pprint(args)
        raise SystemExit(args.exec_command())
    raise SystemExit(0 if args.helped else 1)
