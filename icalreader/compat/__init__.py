"""Switches that change how strictly calendar content is parsed.

By default the reader is permissive and does not check that BEGIN and END
lines are balanced. Strict checking can be enabled for a block of code:

```python
from icalreader.compat import enable_strict_blocks
from icalreader.reader import parse_calendar

with enable_strict_blocks():
    calendar = parse_calendar(content)
```
"""

from .block_compat import enable_strict_blocks, is_strict_blocks_enabled

__all__ = [
    "enable_strict_blocks",
    "is_strict_blocks_enabled",
]
