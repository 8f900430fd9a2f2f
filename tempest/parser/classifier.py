# Tempest UDP Relay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Classifies the set of flags seen on a command line into a single `CommandKind`.

Each command is described by a `CommandRule`: the flag that selects it and the
full set of flags it tolerates. Rules are evaluated in a fixed priority order and
the first rule whose selector is present decides the outcome:

    RELAY    --url      [--format] [--interval] [--log] [--daemon]
    TRACE    --trace    [--format] [--interval] [--log]
    STOP     --stop
    VERSION  --version
    HELP     --help

A selected command whose flags are not a subset of its allowed set is invalid.
With no selector present, an empty set is `EMPTY` and anything else is invalid.
"""
from dataclasses import dataclass

from tempest.exceptions import CommandLineError
from tempest.parser.parser_types import CommandKind, Flag


@dataclass(frozen=True)
class CommandRule:
    """Selector flag and allowed flags for one command."""

    kind: CommandKind
    selector: Flag
    allowed: frozenset[Flag]

    def matches(self, flags: frozenset[Flag]) -> bool:
        """Return True if this rule's selector flag is present."""
        return self.selector in flags

    def validate(self, flags: frozenset[Flag]) -> None:
        """Raise CommandLineError if flags outside the allowed set are present."""
        foreign = flags - self.allowed
        if foreign:
            names = ", ".join(sorted(f"--{flag}" for flag in foreign))
            raise CommandLineError(f"{names} cannot be combined with --{self.selector}")


COMMAND_RULES: tuple[CommandRule, ...] = (
    CommandRule(
        CommandKind.RELAY,
        Flag.URL,
        frozenset({Flag.URL, Flag.FORMAT, Flag.INTERVAL, Flag.LOG, Flag.DAEMON}),
    ),
    CommandRule(
        CommandKind.TRACE,
        Flag.TRACE,
        frozenset({Flag.TRACE, Flag.FORMAT, Flag.INTERVAL, Flag.LOG}),
    ),
    CommandRule(CommandKind.STOP, Flag.STOP, frozenset({Flag.STOP})),
    CommandRule(CommandKind.VERSION, Flag.VERSION, frozenset({Flag.VERSION})),
    CommandRule(CommandKind.HELP, Flag.HELP, frozenset({Flag.HELP})),
)


def classify(flags: frozenset[Flag]) -> CommandKind:
    """
    Resolve the flags present on a command line to exactly one command.

    Args:
        flags (frozenset[Flag]): Every flag seen during the scan.

    Returns:
        CommandKind: The selected command, or `CommandKind.EMPTY` for no flags.

    Raises:
        CommandLineError: If the selected command has foreign flags, or flags are
            present without any command selector.
    """
    for rule in COMMAND_RULES:
        if rule.matches(flags):
            rule.validate(flags)
            return rule.kind
    if flags:
        names = ", ".join(sorted(f"--{flag}" for flag in flags))
        raise CommandLineError(f"No command requested: {names}")
    return CommandKind.EMPTY
