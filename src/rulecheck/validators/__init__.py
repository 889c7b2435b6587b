"""Built-in validators.

Each validator is called as ``validator(value, *params)`` and returns None
when the value passes or a ``Failure`` when it does not. Values of a kind
the validator does not support raise ``WrongTypeError``.
"""

from types import MappingProxyType

from . import cards, codes, dates, files, network, size, structure, text

BUILTIN_VALIDATORS = MappingProxyType({
    "empty": size.empty,
    "email": text.email,
    "url": text.url,
    "accepted": text.accepted,
    "alpha": text.alpha,
    "alpha_numeric": text.alpha_numeric,
    "alpha_under": text.alpha_under,
    "alpha_dash": text.alpha_dash,
    "ascii": text.ascii_only,
    "int": text.integer,
    "float": text.decimal,
    "json": text.json_text,
    "ip": network.ip,
    "ipv4": network.ipv4,
    "ipv6": network.ipv6,
    "time": dates.time,
    "upper_case": text.upper_case,
    "lower_case": text.lower_case,
    "country_code2": codes.country_code2,
    "country_code3": codes.country_code3,
    "currency_code": codes.currency_code,
    "language_code2": codes.language_code2,
    "language_code3": codes.language_code3,
    "credit_card": cards.credit_card,
    "password": text.password,
    "min": size.min_size,
    "max": size.max_size,
    "len": size.length,
    "gt": size.greater_than,
    "lt": size.less_than,
    "in": size.in_list,
    "not_in": size.not_in_list,
    "date": dates.date,
    "date_gte": dates.date_gte,
    "date_lte": dates.date_lte,
    "date_gt": dates.date_gt,
    "date_lt": dates.date_lt,
    "regex": text.regex,
    "contains": text.contains,
    "has_prefix": text.has_prefix,
    "has_suffix": text.has_suffix,
    "has_keys": structure.has_keys,
    "has_only_keys": structure.has_only_keys,
    "file_exists": files.file_exists,
})

__all__ = ["BUILTIN_VALIDATORS"]
