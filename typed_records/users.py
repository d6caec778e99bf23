"""Decoders for the sample "user" documents shown in the UI."""
from __future__ import annotations

from .decoders import (
    bool_attr,
    float_attr,
    int_attr,
    int_list_attr,
    record_attr,
    records_of,
    string_attr,
    string_list_attr,
    typed_record,
)

address_decoder = typed_record(
    string_attr('street'),
    string_attr('city'),
    string_attr('country'),
)

user_decoder = typed_record(
    int_attr('id'),
    string_attr('name'),
    int_attr('age'),
    float_attr('height'),
    bool_attr('active'),
    string_list_attr('tags'),
    int_list_attr('scores'),
    record_attr('address', address_decoder),
)

users_decoder = records_of(user_decoder)
