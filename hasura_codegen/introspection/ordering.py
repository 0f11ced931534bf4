"""
Field ordering.
"""

from typing import Iterable, Sequence

from .types import FieldDescriptor


def _pick_fields(
    names: Iterable[str], fields: list[FieldDescriptor]
) -> tuple[list[FieldDescriptor], list[FieldDescriptor]]:
    picked: list[FieldDescriptor] = []
    remaining = list(fields)
    for name in names:
        match = next((f for f in remaining if f.name == name), None)
        if match is None:
            continue
        picked.append(match)
        remaining = [f for f in remaining if f.name != name]
    return picked, remaining


def sort_field_order(
    fields: Sequence[FieldDescriptor],
    head_fields: Iterable[str] = (),
    tail_fields: Iterable[str] = (),
) -> list[FieldDescriptor]:
    """
    Move ``head_fields`` to the front and ``tail_fields`` to the back.

    Head and tail fields keep the order of the name lists; everything else
    keeps its discovery order. Names without a matching field are skipped,
    and a name listed in both lists stays in the head.
    """
    head, rest = _pick_fields(head_fields, list(fields))
    tail, remain = _pick_fields(tail_fields, rest)
    return [*head, *remain, *tail]
