#!/usr/bin/env python3

import sys
import argparse

from .lexer import tokenize
from .parser import parse
from .evaluator import evaluate
from .environment import Environment
from .commands import execute, is_command
from .common import TRACE, CalcError


def show(expr, args, out):
    if args.tokens:
        print(list(tokenize(expr)), file=out)
    if args.postfix:
        _, postfix = parse(tokenize(expr))
        print(' '.join(t.lexeme for t in postfix), file=out)


def repl(env, input=None, output=None, errors=None, args=None):
    input = sys.stdin if input is None else input
    output = sys.stdout if output is None else output
    errors = sys.stderr if errors is None else errors

    for line in input:
        line = line.strip()
        if not line:
            continue

        try:
            if is_command(line):
                if not execute(line, env, output):
                    break
                continue

            if args is not None:
                show(line, args, output)
            print(evaluate(line, env), file=output)
        except CalcError as e:
            print(f"*** ERROR: {e}", file=errors)


def _main(args, env):
    if args.file is not None:
        with open(args.file) as f:
            repl(env, f, args=args)
        return

    if not args.input:
        repl(env, args=args)
        return

    result = None
    for expr in args.input:
        show(expr, args, sys.stdout)
        result = evaluate(expr, env)

    print(result)


def main(argv=None):
    argp = argparse.ArgumentParser(prog='rpncalc')
    argp.add_argument('input', nargs='*')
    argp.add_argument('-f', '--file', type=str)
    argp.add_argument('--tokens', action='store_true')
    argp.add_argument('--postfix', action='store_true')
    args = argp.parse_args(argv)

    try:
        _main(args, Environment())
        return 0
    except CalcError as e:
        if TRACE:
            import traceback

            traceback.print_exception(e)
        else:
            print(f'Error: {e}')
        return 1


if __name__ == "__main__":
    sys.exit(main())
