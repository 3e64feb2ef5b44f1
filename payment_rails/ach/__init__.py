from payment_rails.ach.codec import AchCodec
from payment_rails.ach.fields import ConstantField, NumericField, RecordLayout, TextField
from payment_rails.ach.records import FILLER, RecordType

__all__ = ["AchCodec", "ConstantField", "NumericField", "RecordLayout", "TextField", "FILLER", "RecordType"]
