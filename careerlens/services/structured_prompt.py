"""
Prompt -> JSON object invocation with fallback.

Every AI-backed route goes through StructuredPromptInvoker:

    1. fail fast when no credential is configured (no network I/O)
    2. one awaited, non-streamed model call (no retries)
    3. pull the JSON object out of the raw text
    4. json.loads it
    5. shallow required-field check against an ExpectedShape

Each failure raises an InvocationError subclass. invoke_with_fallback()
turns any of them into the caller's static fallback payload.
"""
import copy
import json
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Mapping, Optional, Protocol, Tuple

from careerlens.services.model_client import ModelConfig, TextModelClient
from careerlens.utils.logger import get_logger
from careerlens.utils.metrics import inc, track_duration

logger = get_logger("ai")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class InvocationError(Exception):
    """Base for every failure downstream of a well-formed request."""

    reason = "invocation_error"


class CredentialMissing(InvocationError):
    reason = "credential_missing"

    def __init__(self):
        super().__init__("No API key configured for the hosted model")


class ModelCallFailed(InvocationError):
    reason = "model_call_failed"

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Model call failed: {type(cause).__name__}: {cause}")


class NoJSONFound(InvocationError):
    reason = "no_json_found"

    def __init__(self):
        super().__init__("AI response did not contain valid JSON")


class MalformedJSON(InvocationError):
    reason = "malformed_json"

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"AI response JSON could not be parsed: {cause}")


class ShapeMismatch(InvocationError):
    reason = "shape_mismatch"

    def __init__(self, missing_fields: Tuple[str, ...]):
        self.missing_fields = missing_fields
        super().__init__(
            "AI response does not have the expected structure; missing: "
            + ", ".join(missing_fields)
        )


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ExpectedShape:
    """Required top-level fields, plus the declared value sets of enum fields.

    Only presence is checked. enum_fields documents the contract but is not
    enforced on model output.
    """

    name: str
    required_fields: Tuple[str, ...]
    enum_fields: Mapping[str, FrozenSet[str]] = field(default_factory=dict)

    def missing_fields(self, obj: Mapping[str, Any]) -> Tuple[str, ...]:
        return tuple(f for f in self.required_fields if obj.get(f) is None)


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

class JsonExtractor(Protocol):
    def extract(self, text: str) -> str:
        """Return the candidate JSON substring or raise NoJSONFound."""
        ...


class FirstLastBraceExtractor:
    """Slice from the first '{' to the last '}' of the whole response.

    Assumes at most one JSON object in the text; stray braces in surrounding
    prose or a second object end up inside the slice.
    """

    def extract(self, text: str) -> str:
        json_start = text.find("{")
        json_end = text.rfind("}") + 1
        if json_start == -1 or json_end <= json_start:
            raise NoJSONFound()
        return text[json_start:json_end]


class BalancedBraceExtractor:
    """Return the first balanced {...} span, ignoring braces inside strings."""

    def extract(self, text: str) -> str:
        start = text.find("{")
        while start != -1:
            end = self._match(text, start)
            if end is not None:
                return text[start:end + 1]
            start = text.find("{", start + 1)
        raise NoJSONFound()

    @staticmethod
    def _match(text: str, start: int) -> Optional[int]:
        depth = 0
        in_string = False
        escaped = False
        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return i
        return None


EXTRACTORS = {
    "first_last_brace": FirstLastBraceExtractor,
    "balanced": BalancedBraceExtractor,
}


def get_extractor(name: str) -> JsonExtractor:
    try:
        return EXTRACTORS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown JSON extraction strategy '{name}'. Options: {', '.join(EXTRACTORS)}"
        )


# ---------------------------------------------------------------------------
# Invoker
# ---------------------------------------------------------------------------

class StructuredPromptInvoker:

    def __init__(
        self,
        client: TextModelClient,
        config: ModelConfig,
        extractor: Optional[JsonExtractor] = None,
    ):
        self.client = client
        self.config = config
        self.extractor = extractor or FirstLastBraceExtractor()

    async def invoke(self, prompt_text: str, expected_shape: ExpectedShape) -> Dict[str, Any]:
        if not prompt_text:
            raise ValueError("prompt_text must be non-empty")

        if not self.config.has_credential:
            raise CredentialMissing()

        logger.debug(
            f"[AI] Sending {expected_shape.name} prompt",
            extra={"call_site": expected_shape.name, "model": self.config.model,
                   "prompt_chars": len(prompt_text)},
        )

        try:
            async with track_duration("gemini", expected_shape.name):
                text = await self.client.generate_text(prompt_text)
        except Exception as exc:
            raise ModelCallFailed(exc) from exc

        logger.debug(
            f"[AI] Received {len(text)} chars: {text[:200]!r}",
            extra={"call_site": expected_shape.name, "response_chars": len(text)},
        )

        json_string = self.extractor.extract(text)

        try:
            parsed = json.loads(json_string)
        except json.JSONDecodeError as exc:
            raise MalformedJSON(exc) from exc

        if not isinstance(parsed, dict):
            raise MalformedJSON(TypeError(f"expected a JSON object, got {type(parsed).__name__}"))

        missing = expected_shape.missing_fields(parsed)
        if missing:
            raise ShapeMismatch(missing)

        return parsed

    async def invoke_with_fallback(
        self,
        prompt_text: str,
        expected_shape: ExpectedShape,
        fallback: Any,
    ) -> Tuple[Any, bool]:
        """Return (result, used_fallback). The fallback is returned as a copy."""
        call_site = expected_shape.name
        try:
            result = await self.invoke(prompt_text, expected_shape)
        except InvocationError as exc:
            inc(f"ai.{call_site}.fallback")
            inc(f"ai.{call_site}.fallback.{exc.reason}")
            logger.warning(
                f"[AI] {call_site}: using fallback ({exc})",
                extra={
                    "call_site": call_site,
                    "outcome": exc.reason,
                    "missing_fields": getattr(exc, "missing_fields", None),
                },
            )
            return copy.deepcopy(fallback), True

        inc(f"ai.{call_site}.success")
        logger.info(f"[AI] {call_site}: structured result parsed",
                    extra={"call_site": call_site, "outcome": "ok"})
        return result, False
