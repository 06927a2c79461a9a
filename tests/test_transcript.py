from src.modules.proxy.schemas import ChatMessage
from src.modules.proxy.transcript import build_transcript


def test_transcript_renders_roles_in_order():
    messages = [
        ChatMessage(role="system", content="Be brief."),
        ChatMessage(role="user", content="Hi"),
        ChatMessage(role="assistant", content="Hello!"),
        ChatMessage(role="user", content="Bye"),
    ]

    assert build_transcript(messages) == (
        "System: Be brief.\n\n"
        "User: Hi\n\n"
        "Assistant: Hello!\n\n"
        "User: Bye\n\n"
        "Assistant:"
    )


def test_empty_transcript_is_just_the_cue():
    assert build_transcript([]) == "Assistant:"


def test_unknown_roles_are_skipped():
    odd = ChatMessage.model_construct(role="tool", content="42")
    messages = [ChatMessage(role="user", content="Q"), odd]

    assert build_transcript(messages) == "User: Q\n\nAssistant:"
