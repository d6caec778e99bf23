from __future__ import annotations

import os
from pathlib import Path
from typing import List

from .decoders import Decoder, decode_string
from .values import TypedRecord


def load_records(source, decoder: Decoder[List[TypedRecord]]) -> List[TypedRecord]:
    """Decode records from a file path, an open stream, or an uploaded file.

    Gradio uploads arrive as paths; older file wrappers expose `.name`.
    """
    if source is None:
        raise ValueError("No file uploaded.")

    if isinstance(source, (str, os.PathLike)):
        text = Path(source).read_text(encoding='utf-8')
    elif hasattr(source, 'read'):
        if hasattr(source, 'seek'):
            source.seek(0)
        text = source.read()
    else:
        text = Path(source.name).read_text(encoding='utf-8')

    if isinstance(text, bytes):
        text = text.decode('utf-8')
    return decode_string(decoder, text)
