from .json_adapter import TimelinePayload, parse_json

__all__ = ["TimelinePayload", "parse_json"]
