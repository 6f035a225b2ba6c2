import json
from typing import List

from kruskal_trace.models import Edge, TraceResult


def trace_to_json(result: TraceResult) -> str:
    """Compact trace document: {"steps":[...],"mstWeight":N}.

    Key order follows TraceStep.to_dict. Non-ASCII text is written as-is.
    """
    return json.dumps(result.to_dict(), separators=(",", ":"), ensure_ascii=False)


class TraceJSONReporter:
    """Generates JSON trace documents"""

    def generate(self, result: TraceResult, output_path: str) -> str:
        """Write the trace to a JSON file"""
        text = trace_to_json(result)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)

        return text


class MSTJSONReporter:
    """Generates JSON reports for the classic MST result"""

    def generate(self, edges: List[Edge], total_cost: int, output_path: str):
        report = {
            "edges": [e.to_dict() for e in edges],
            "totalCost": total_cost,
        }

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        return report
