from ..base import ProcessRule
from ...extractors.process import parse_process_document


class Rule(ProcessRule):
    def description(self) -> str:
        return "Sections must not be repeated"

    def run(self) -> tuple:
        seen = set()
        repeated = []
        lines = []
        for label, lineno in parse_process_document(self.document.text).headers:
            if label in seen:
                if label not in repeated:
                    repeated.append(label)
                lines.append(lineno)
            seen.add(label)

        if repeated:
            return self.failed(f"Sections declared more than once: {', '.join(repeated)}", lines)
        return ("PASS", "")
