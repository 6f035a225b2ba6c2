from .json_report import MSTJSONReporter, TraceJSONReporter, trace_to_json
from .terminal_report import print_mst_summary, print_trace_table
