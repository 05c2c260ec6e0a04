"""klaw-option: an Option type (Present | Absent) for Python 3.11+.

Flat imports (preferred):
    from klaw_option import Option, Present, Absent, match, lmatch
    from klaw_option import UnwrapError, NonExhaustiveMatchError, optional

Submodule imports (for organization):
    from klaw_option.option import Option, Variant
    from klaw_option.matching import MatchBuilder, run_match
    from klaw_option.errors import UnwrapError
"""

# Configuration
from klaw_option._config import OptionConfig, get_config, init

# Constructors
from klaw_option.constructors import (
    Absent,
    Present,
    absent,
    from_nullable,
    lmatch,
    match,
    present,
)

# Decorators
from klaw_option.decorators import optional

# Errors
from klaw_option.errors import (
    DuplicateArmError,
    InvalidArgumentError,
    MatchError,
    NonExhaustiveMatchError,
    OptionError,
    UnwrapError,
)

# Matching
from klaw_option.matching import Arm, MatchBuilder

# Types
from klaw_option.option import Option, Variant
from klaw_option.propagate import Propagate

__all__ = [
    # Constructors
    'Absent',
    # Matching
    'Arm',
    # Errors
    'DuplicateArmError',
    'InvalidArgumentError',
    'MatchBuilder',
    'MatchError',
    'NonExhaustiveMatchError',
    # Types
    'Option',
    # Configuration
    'OptionConfig',
    'OptionError',
    'Present',
    # Propagation
    'Propagate',
    'UnwrapError',
    'Variant',
    'absent',
    'from_nullable',
    'get_config',
    'init',
    'lmatch',
    'match',
    # Decorators
    'optional',
    'present',
]
