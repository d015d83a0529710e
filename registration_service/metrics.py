from prometheus_client import Counter

REGISTRATION_VALIDATIONS = Counter(
    "registration_validations_total",
    "Total registration validations performed",
    ["account_kind", "outcome"]
)

REGISTRATION_RULE_FAILURES = Counter(
    "registration_rule_failures_total",
    "Registration validations rejected, by first failing field",
    ["account_kind", "field"]
)
