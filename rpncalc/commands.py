from .common import CommandError


def _vars(env, args, out):
    for name, value in env:
        print(f"{name} = {value}", file=out)
    return True


def _clear(env, args, out):
    if not args:
        env.clear()
    else:
        for name in args:
            env.remove(name)
    return True


def _exit(env, args, out):
    return False


COMMANDS = {
    ':vars': _vars,
    ':clear': _clear,
    ':exit': _exit,
    ':quit': _exit,
}


def is_command(line):
    return line.startswith(':')


def execute(line, env, out):
    """Run a session directive. Returns False when the session should end."""
    name, *args = line.split()
    if name not in COMMANDS:
        raise CommandError(f"unrecognized command: {line}")
    return COMMANDS[name](env, args, out)
