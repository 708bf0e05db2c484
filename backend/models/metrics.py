from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    field_serializer,
    field_validator,
    model_serializer,
    model_validator,
)

from ingest.timestamps import format_rfc3339_nano

# Serialized even when empty; every other field is dropped when falsy
ALWAYS_SERIALIZED = ("created_at", "model")


class Metrics(BaseModel):
    """Usage counters reported by the model runtime. Durations are nanoseconds."""

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    total_duration: int = 0
    load_duration: int = 0
    prompt_eval_count: int = 0
    prompt_eval_duration: int = 0
    eval_count: int = 0
    eval_duration: int = 0

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        # "Model" and "USER_ID" land on model / user_id; the last matching key wins
        if not isinstance(data, dict):
            return data
        by_lower = {name.lower(): name for name in cls.model_fields}
        matched = {}
        for key, value in data.items():
            if isinstance(key, str) and key not in cls.model_fields:
                key = by_lower.get(key.lower(), key)
            matched[key] = value
        return matched

    @field_validator("*", mode="before")
    @classmethod
    def _null_is_default(cls, value: Any, info: ValidationInfo) -> Any:
        field = cls.model_fields[info.field_name]
        if value is None and not field.is_required():
            return field.default
        return value


class UserModelMetricsPayload(Metrics):
    """What a client may send. created_at is not accepted from the wire."""

    model: str = ""
    user_id: str = ""
    user_name: str = ""


class UserModelMetrics(UserModelMetricsPayload):
    created_at: int     # receipt time, ns since epoch

    @classmethod
    def from_payload(cls, payload: UserModelMetricsPayload, created_at: int) -> "UserModelMetrics":
        return cls(created_at=created_at, **payload.model_dump())

    @field_serializer("created_at")
    def _serialize_created_at(self, created_at: int) -> str:
        return format_rfc3339_nano(created_at)

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        ordered = {key: data[key] for key in ALWAYS_SERIALIZED}
        ordered.update(
            (key, value) for key, value in data.items()
            if key not in ALWAYS_SERIALIZED and value
        )
        return ordered
