from ..base import ProcessRule
from ...extractors.process import parse_integration_points, parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Integration points must reference a declared LO"

    def run(self) -> tuple:
        doc = parse_process_document(self.document.text)
        section = doc.section("Integration Points")
        if section is None:
            return ("PASS", "")
        declared = set(doc.declared_lo_ids)

        problems = []
        lines = []
        for point in parse_integration_points(section.body):
            if not point.lo_refs:
                problems.append(f"{point.system} (no LO reference)")
                lines.append(point.line)
                continue
            for ref in point.lo_refs:
                if ref not in declared:
                    problems.append(f"{point.system} -> {ref}")
                    lines.append(point.line)

        if problems:
            return self.failed(f"Integration points with unresolved LO references: {', '.join(problems)}", lines)
        return ("PASS", "")
