# src/eafitos_shell/model.py
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field


class CommandEntry(BaseModel):
    """
    A single registered shell command: the name typed by the user and the
    handler that executes it. Entries are immutable once created.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Exact, case-sensitive command name.")
    handler: Callable[..., Any] = Field(description="Called as handler(args, ctx).")
    help_text: str = Field(default="", description="Usage line shown by the help command.")
    group: str = Field(default="basic", description="Section the command is listed under in help.")
