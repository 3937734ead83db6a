from dataclasses import dataclass, field
import time
from typing import Any, Callable, List, Optional
from ..config import SuiteConfig, configure
from ..errors import AssertionAbort, ExplicitFailure
from ..formatting.sprintf import sprintf
from ..logging import get_logger
from ..reporters.console import ConsoleSink, render_line

@dataclass
class TestCaseResult:
    __test__ = False
    id: str
    passed: int = 0
    failed: int = 0
    errors: int = 0
    duration: float = 0.0
    logs: List[str] = field(default_factory=list)

@dataclass
class SuiteResult:
    suite: str
    cases: List[TestCaseResult] = field(default_factory=list)
    @property
    def passed(self) -> int: return sum(c.passed for c in self.cases)
    @property
    def failed(self) -> int: return sum(c.failed for c in self.cases)
    @property
    def errors(self) -> int: return sum(c.errors for c in self.cases)

@dataclass(frozen=True)
class TestCase:
    __test__ = False
    name: str
    body: Callable[[], None]

@dataclass(frozen=True)
class Message:
    text: str
    status: Optional[bool]

def type_tag(value: Any) -> str:
    """Runtime type tag reported by the typeof assertions."""
    return type(value).__name__

def strict_equals(actual: Any, expected: Any) -> bool:
    """Equality without cross-type coercion; NaN never equals anything."""
    if isinstance(actual, bool) or isinstance(expected, bool):
        return type(actual) is type(expected) and bool(actual == expected)
    if isinstance(actual, (int, float)) and isinstance(expected, (int, float)):
        return bool(actual == expected)
    return type(actual) is type(expected) and bool(actual == expected)

class TestRunner:
    """A suite of named tests sharing config, setup/teardown and a message buffer.

    Typical use::

        mut = TestRunner({"name": "Sample", "abortOnErrors": True})
        mut.set_setup(lambda: ...)
        mut.add_test("equals", lambda: mut.assert_equals(0, 0, "number"))
        mut.run()

    To collect messages for your own filtering, turn off ``auto_flush`` and
    ``skip_success``, pass a no-op sink and read :meth:`get_messages` after
    the run instead of calling :meth:`flush` in the tests.
    """
    __test__ = False

    def __init__(self, options: Any = None):
        self.config: SuiteConfig = configure(options)
        self.log = get_logger("runner")
        self._out = self.config.output_sink or ConsoleSink()
        self._tests: List[TestCase] = []
        self._setup: Optional[Callable[[], None]] = None
        self._teardown: Optional[Callable[[], None]] = None
        self._messages: List[Message] = []
        self.results = SuiteResult(suite=self.config.name)

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def tests(self) -> List[TestCase]:
        return list(self._tests)

    # ---------- registration ----------
    def set_setup(self, fn: Optional[Callable[[], None]]) -> None:
        self._setup = fn

    def set_teardown(self, fn: Optional[Callable[[], None]]) -> None:
        self._teardown = fn

    def add_test(self, name: str, fn: Callable[[], None]) -> None:
        self._tests.append(TestCase(name, fn))

    # ---------- reporting ----------
    def _report(self, msg: str, status: bool) -> None:
        if self.config.skip_success and status:
            return
        text = self.config.prefix + msg
        if self.config.auto_flush:
            self._out(text, status)
        else:
            self._messages.append(Message(text, status))
        if status is False and self.config.abort_on_errors:
            if not self.config.auto_flush:
                self.flush()
            raise AssertionAbort(msg)

    def fail(self, msg: str) -> None:
        self.flush()
        raise ExplicitFailure(msg)

    def get_messages(self) -> List[Message]:
        return list(self._messages)

    def flush(self) -> None:
        if self._messages:
            lines = "\n".join(render_line(m.text, m.status) for m in self._messages)
            self._out(f"\n{lines}\n", True)
        self._messages = []

    # ---------- assertions ----------
    def _assert(self, kind: str, status: bool, act: Any, exp: Any, msg: str, op: str = "=") -> None:
        self._report(sprintf("%s%s %s - act=%s, exp%s%s",
                             f"{msg} -- " if msg else "", kind, "ok" if status else "err", act, op, exp), status)

    def assert_equals(self, act: Any, exp: Any, msg: str = "") -> None:
        self._assert("assertEquals", strict_equals(act, exp), act, exp, msg)

    def assert_not_equals(self, act: Any, exp: Any, msg: str = "") -> None:
        self._assert("assertNotEquals", not strict_equals(act, exp), act, exp, msg, "!=")

    def assert_typeof_equals(self, act: Any, exp: str, msg: str = "") -> None:
        self._assert("assertTypeofEquals", type_tag(act) == exp, type_tag(act), exp, msg)

    def assert_typeof_not_equals(self, act: Any, exp: str, msg: str = "") -> None:
        self._assert("assertTypeofNotEquals", type_tag(act) != exp, type_tag(act), exp, msg, "!=")

    # ---------- execution ----------
    def _call_hook(self, hook: Optional[Callable[[], None]]) -> None:
        if hook is not None:
            hook()

    def run(self) -> None:
        self.results = SuiteResult(suite=self.name)
        self._out(f"Suite: {self.name}", None)
        for test in self._tests:
            res = TestCaseResult(id=test.name)
            started = time.perf_counter()
            try:
                self._call_hook(self._setup)
                self._out(f"Running: {test.name}", None)
                self.log.debug("running %s", test.name)
                test.body()
                res.passed = 1
                self._out("Test passed", None)
            except AssertionAbort as e:
                res.failed = 1
                res.logs.append(str(e))
                self.log.debug("aborted %s: %s", test.name, e)
                self._out(f"Test failed: {e}", None)
            except Exception as e:
                res.failed = 1
                res.errors = 1
                res.logs.append(f"Error: {e!r}")
                self.log.debug("error in %s", test.name, exc_info=True)
                self._out(f"Test failed: {e}", None)
            res.duration = time.perf_counter() - started
            try:
                self._call_hook(self._teardown)
            except Exception as e:
                res.logs.append(f"Teardown error: {e!r}")
                self.log.debug("teardown failed after %s", test.name, exc_info=True)
                self._out(f"Teardown failed: {e}", None)
            self.results.cases.append(res)
            self._out(None, None)

    # camelCase spellings of the assertion API
    setSetup = set_setup
    setTeardown = set_teardown
    addTest = add_test
    getMessages = get_messages
    assertEquals = assert_equals
    assertNotEquals = assert_not_equals
    assertTypeofEquals = assert_typeof_equals
    assertTypeofNotEquals = assert_typeof_not_equals
