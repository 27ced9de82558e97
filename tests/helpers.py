"""Message construction helpers for tests.

The decoder does not encode messages, so tests lay lines out by hand.
"""

from __future__ import annotations

from typing import Callable, Mapping

from iso8583_decoder import FieldDefinition

SCHEMA_TEXT = """\
# id,name,regex,len,variable,numeric[,label]
2,PAN,^[0-9]{1,19}$,19,1,1,Primary Account Number
3,PROC_CODE,^[0-9]{6}$,6,0,1,Processing Code
4,AMOUNT,^[0-9]{12}$,12,0,1,Transaction Amount
11,STAN,^[0-9]{6}$,6,0,1,System Trace Audit Number
41,TERMINAL_ID,,8,0,0,Terminal Id
48,ADDITIONAL,,999,1,0
70,NET_MGMT_CODE,^[0-9]{3}$,3,0,1,Network Management Code
100,RCV_INST_ID,^[0-9]{1,11}$,11,1,1,Receiving Institution Id
"""

MessageBuilder = Callable[..., str]


def bits_to_hex(bits: list[int]) -> str:
    """Pack a list of 0/1 bits into uppercase hex, four bits per character."""
    return "".join(
        format(int("".join(map(str, bits[i : i + 4])), 2), "X") for i in range(0, len(bits), 4)
    )


def build_message(
    values: Mapping[int, str],
    registry: Mapping[int, FieldDefinition],
    *,
    message_type: str = "0200",
    base_identifier: str = "016000000",
) -> str:
    """Lay out a message line for ``values`` the way the decoder expects it."""
    bits = [0] * 128
    for field_number in values:
        bits[field_number - 1] = 1
    secondary = any(n > 64 for n in values)
    if secondary:
        bits[0] = 1

    line = "ISO" + base_identifier + message_type + bits_to_hex(bits[:64])
    if secondary:
        line += bits_to_hex(bits[64:])

    for field_number in sorted(values):
        definition = registry[field_number]
        value = values[field_number]
        if definition.is_variable_length:
            line += str(len(value)).zfill(definition.length_digit_count)
        line += value
    return line
