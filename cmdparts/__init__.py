"""cmdparts: assemble argv-style token lists from configuration values.

Two facilities make up the package:
- Token assembly: declarative rule lists that turn a configuration value into
  an ordered list of command-line tokens
- Fluent building: setter factories that make configuration values chainable

Quick Start:
    >>> from cmdparts.commands import KillCommand
    >>> KillCommand.new().with_force().with_pids([12, 34]).to_parts()
    ['kill', '--force', '12', '34']
"""

# Version
__version__ = "1.0.0"

# Configuration
from cmdparts.config import get_config

# Token assembly
from cmdparts.assembler import (
    Assembler,
    CommandConfig,
    Flag,
    OptionalDisplay,
    OptionalKeyValue,
    OptionalMapped,
    OptionalPrefixed,
    Positional,
    RepeatedDisplay,
    RepeatedMapped,
    Rule,
)
from cmdparts.builder import (
    CommandBuilder,
    cmd,
    push_args,
    push_each,
    push_each_display,
    push_flags,
    push_if_some,
    push_if_some_display,
    push_if_some_prefix,
    push_options,
)

# Error types
from cmdparts.errors import (
    CmdPartsError,
    InvalidFieldValueError,
    RuleDefinitionError,
    UnknownCommandError,
    ValidationError,
)

# Fluent setters
from cmdparts.fluent import (
    append_setter,
    collection_setter,
    flag_setter,
    new_default,
    optional_setter,
    setter,
)
from cmdparts.tokens import to_token

__all__ = [
    # Version
    "__version__",
    # Assembly
    "Assembler",
    "CommandBuilder",
    "CommandConfig",
    "Flag",
    "OptionalDisplay",
    "OptionalKeyValue",
    "OptionalMapped",
    "OptionalPrefixed",
    "Positional",
    "RepeatedDisplay",
    "RepeatedMapped",
    "Rule",
    "cmd",
    "push_args",
    "push_each",
    "push_each_display",
    "push_flags",
    "push_if_some",
    "push_if_some_display",
    "push_if_some_prefix",
    "push_options",
    "to_token",
    # Fluent
    "append_setter",
    "collection_setter",
    "flag_setter",
    "new_default",
    "optional_setter",
    "setter",
    # Errors
    "CmdPartsError",
    "InvalidFieldValueError",
    "RuleDefinitionError",
    "UnknownCommandError",
    "ValidationError",
    # Config
    "get_config",
]
