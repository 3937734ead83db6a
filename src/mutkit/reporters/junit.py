from ..runners.runner import SuiteResult, TestCaseResult
import xml.etree.ElementTree as ET

class JUnitReporter:
    """Writes a SuiteResult as a JUnit ``<testsuite>`` document.

    Assertion aborts and ``fail()`` become ``<failure>``; any other exception
    raised by a test body becomes ``<error>``.
    """
    def __init__(self, path: str): self.path = path

    def _case(self, parent: ET.Element, c: TestCaseResult) -> None:
        tc = ET.SubElement(parent, "testcase", classname=parent.get("name", ""), name=c.id,
                           time=f"{c.duration:.3f}")
        if c.failed:
            tag = "error" if c.errors else "failure"
            node = ET.SubElement(tc, tag, message=c.logs[0] if c.logs else tag)
            node.text = "\n".join(c.logs)
        elif c.logs:
            ET.SubElement(tc, "system-out").text = "\n".join(c.logs)

    def emit(self, result: SuiteResult) -> None:
        testsuite = ET.Element("testsuite", name=result.suite, tests=str(len(result.cases)),
                               failures=str(result.failed - result.errors), errors=str(result.errors),
                               time=f"{sum(c.duration for c in result.cases):.3f}")
        for c in result.cases:
            self._case(testsuite, c)
        ET.ElementTree(testsuite).write(self.path, encoding="utf-8", xml_declaration=True)
