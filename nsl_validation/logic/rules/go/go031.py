import re

from ..base import ProcessRule
from ...extractors.process import parse_process_document

VERSION_RE = re.compile(r"^\d+(\.\d+)*$")


class Rule(ProcessRule):
    def description(self) -> str:
        return "Version must be dotted numeric (e.g. 1.0)"

    def run(self) -> tuple:
        version = parse_process_document(self.document.text).section_fields("Core Metadata").get("Version")
        if version is None or not version.value or VERSION_RE.match(version.value):
            return ("PASS", "")
        return self.failed(f"Invalid version '{version.value}'. Expected dotted numbers such as 1.0", [version.line])
