"""Pydantic v2 request/response schemas."""

from pydantic import BaseModel, HttpUrl, field_validator

from subvtt.core import Cue, CueList, is_well_formed_timecode


class UrlConvertRequest(BaseModel):
    """Request body for converting a remote subtitle file."""

    url: HttpUrl


class CueParseRequest(BaseModel):
    """Request body carrying WebVTT text to load into a cue list."""

    vtt: str


class CueItem(BaseModel):
    """Cue as submitted by an editor."""

    start: str
    end: str
    text: str

    @field_validator("start", "end")
    @classmethod
    def validate_timecode(cls, value: str) -> str:
        if not is_well_formed_timecode(value):
            raise ValueError(f"'{value}' is not a HH:MM:SS.mmm timecode")
        return value


class CueSerializeRequest(BaseModel):
    """Request body for serializing a cue list to WebVTT."""

    cues: list[CueItem]

    def to_cue_list(self) -> CueList:
        return CueList(
            Cue(index=i, start=item.start, end=item.end, text=item.text)
            for i, item in enumerate(self.cues)
        )


class CueResponse(BaseModel):
    """Cue with its derived timing fields."""

    index: int
    start: str
    end: str
    text: str
    start_time: float
    end_time: float
    duration: str
    overlapping: bool


class CueListResponse(BaseModel):
    """Response body for a parsed cue list."""

    cues: list[CueResponse]

    @classmethod
    def from_cue_list(cls, cues: CueList) -> "CueListResponse":
        return cls(
            cues=[
                CueResponse(
                    index=cue.index,
                    start=cue.start,
                    end=cue.end,
                    text=cue.text,
                    start_time=cue.start_time,
                    end_time=cue.end_time,
                    duration=cue.duration,
                    overlapping=overlapping,
                )
                for cue, overlapping in zip(cues, cues.overlaps(), strict=True)
            ]
        )
