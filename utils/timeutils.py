from datetime import datetime, timezone


def now_iso() -> str:
    """현재 UTC 시각 ISO-8601 문자열 (밀리초, 'Z' 접미사)"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
