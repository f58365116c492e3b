"""
Shared constants used across the rule compiler.

Separators are part of the stored rule-string format and must not change.
"""

# Rule-string grammar
RULE_SEPARATOR = "||"
ARGUMENT_SEPARATOR = ":"
LIST_SEPARATOR = ","

# Fixed messages for the custom predicates
IPV4_MESSAGE = "Invalid IPv4 address"
IPV6_MESSAGE = "Invalid IPv6 address"
IP_MESSAGE = "Invalid IP address"
CUSTOM_LIST_MESSAGE = "Invalid Element(s): {invalid}. Allowed: {allowed}"

# Error kind reported by every custom predicate
CUSTOM_KIND = "any.custom"

# Port bounds for number.port
PORT_MIN = 0
PORT_MAX = 65535
