"""Router configuration.

RouterConfig is a frozen dataclass, immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(ignore_case=True)
        router = Router(config=config)
    """

    # Pattern compilation (literal routes always compare exactly)
    ignore_case: bool = False
    verbose_patterns: bool = False  # re.VERBOSE: whitespace and # comments in patterns

    @property
    def pattern_flags(self) -> re.RegexFlag:
        """Flags passed to ``re.compile`` for every pattern route."""
        flags = re.NOFLAG
        if self.ignore_case:
            flags |= re.IGNORECASE
        if self.verbose_patterns:
            flags |= re.VERBOSE
        return flags
