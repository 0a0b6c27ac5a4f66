"""
Raw item records as produced by the model/tool layer.

Raw items are plain dicts keyed by their wire names. Common shapes:

- ``message``: ``id``, ``role``, ``status``, ``content`` (list of segments such as
  ``{"type": "output_text", "text": ...}`` or ``{"type": "refusal", ...}``)
- ``function_call``: ``id``, ``callId``, ``name``, ``arguments``, ``status``
- ``function_call_result``: ``id``, ``callId``, ``name``, ``output``, ``status``;
  ``output`` is a string, a ``{"type": "text", "text": ...}`` record or a list
- ``reasoning``: ``id``, ``content`` (list of ``input_text`` segments)

Nothing in this package validates these shapes.
"""

from typing import Any, Mapping

RawItem = Mapping[str, Any]
