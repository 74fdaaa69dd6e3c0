# wordtok/api/schemas.py
"""
Request and response bodies for the tokenizer HTTP API.
"""

from typing import List

from pydantic import BaseModel, StrictInt, StrictStr


class EncodeRequest(BaseModel):
    text: StrictStr


class EncodeResponse(BaseModel):
    tokens: List[int]


class DecodeRequest(BaseModel):
    tokens: List[StrictInt]


class DecodeResponse(BaseModel):
    text: str


class ResetResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class TrainRequest(BaseModel):
    text: StrictStr


class TrainResponse(BaseModel):
    added: List[str]
    size: int
