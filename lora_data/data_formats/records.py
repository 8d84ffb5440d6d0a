"""Pydantic models for the JSONL record schemas.

Every model is strict, so a JSON number or boolean never passes as a string,
and ignores fields it does not declare. Optional fields accept both a missing
key and an explicit ``null``.
"""

from pydantic import BaseModel, ConfigDict, TypeAdapter


class StrictRecord(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)


class Message(StrictRecord):
    role: str
    content: str


class ChatRecord(StrictRecord):
    """``{"messages": [{"role": ..., "content": ...}, ...]}``"""

    messages: list[Message]


class Property(StrictRecord):
    type: str
    description: str | None = None
    enum: list[str] | None = None


class Parameters(StrictRecord):
    type: str
    properties: dict[str, Property]
    required: list[str]


class Function(StrictRecord):
    name: str
    description: str
    parameters: Parameters


class ToolRecord(StrictRecord):
    """An OpenAI-style function definition."""

    type: str
    function: Function


class TextRecord(StrictRecord):
    text: str


class CompletionRecord(StrictRecord):
    prompt: str
    completion: str


#: Adapters are built once at import so schema compilation is not repeated
#: for every line.
ChatAdapter: TypeAdapter[ChatRecord] = TypeAdapter(ChatRecord)
ToolAdapter: TypeAdapter[ToolRecord] = TypeAdapter(ToolRecord)
TextAdapter: TypeAdapter[TextRecord] = TypeAdapter(TextRecord)
CompletionAdapter: TypeAdapter[CompletionRecord] = TypeAdapter(CompletionRecord)
