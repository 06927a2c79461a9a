from src.modules.proxy.schemas import ChatMessage

ROLE_LABELS = {
    "system": "System",
    "user": "User",
    "assistant": "Assistant",
}

COMPLETION_CUE = "Assistant:"


def build_transcript(messages: list[ChatMessage]) -> str:
    """Flatten a conversation into a plain-text prompt.

    Each message becomes ``"<Role>: <content>"`` followed by a blank line, in
    conversation order, and the result ends with an ``Assistant:`` cue for the
    model to continue from. Messages with an unrecognised role are skipped.
    """
    parts: list[str] = []
    for msg in messages:
        label = ROLE_LABELS.get(msg.role)
        if label is None:
            continue
        parts.append(f"{label}: {msg.content}\n\n")
    parts.append(COMPLETION_CUE)
    return "".join(parts)
