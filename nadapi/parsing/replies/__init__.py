from nadapi.parsing.replies.decode import Reply, is_on, parse_reply, strip_terminator

__all__ = ["Reply", "is_on", "parse_reply", "strip_terminator"]
