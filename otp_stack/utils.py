from __future__ import annotations

import json
from typing import Any


def format_code(code: int, digits: int) -> str:
    return f"{code:0{digits}d}"


def json_dumps(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2)
