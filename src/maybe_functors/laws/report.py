from maybe_functors.laws.pipeline import DiagnosticSeverity, LawResult


class LawReport:
    def __init__(self, result: LawResult, container: str = "Maybe"):
        self.result = result
        self.container = container

    def __str__(self):
        lines = []
        title = f"Law Report: {self.container}"
        lines.append(title)
        lines.append("=" * len(title))
        lines.append(f"Laws: {len(self.result.checked)}")

        errors = [d for d in self.result.diagnostics if d.severity == DiagnosticSeverity.ERROR]
        warnings = [d for d in self.result.diagnostics if d.severity == DiagnosticSeverity.WARNING]

        lines.append(f"Errors: {len(errors)}")
        lines.append(f"Warnings: {len(warnings)}")

        for heading, entries in (("Errors", errors), ("Warnings", warnings)):
            if entries:
                lines.append(f"\n{heading}:")
                for d in entries:
                    lines.append(f"  [{d.code}] {d.message} @ {d.location}")

        return "\n".join(lines)
