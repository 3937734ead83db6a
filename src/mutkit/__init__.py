# Lightweight package init: avoid eager imports of rich/pydantic for formatter-only use.
__all__ = ["TestRunner", "sprintf"]

def __getattr__(name):
    if name == "TestRunner":
        from .runners.runner import TestRunner as _TestRunner
        return _TestRunner
    if name == "sprintf":
        from .formatting.sprintf import sprintf as _sprintf
        return _sprintf
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
