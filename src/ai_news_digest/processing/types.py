from __future__ import annotations

import datetime
from typing import Any, Callable

LogFunc = Callable[[str], None]
ParseFunc = Callable[[bytes], Any]
NowFunc = Callable[[], datetime.datetime]
