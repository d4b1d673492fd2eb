"""
Debt engine limits and display labels shared by the services and any UI layer.
Labels match the Dutch copy used on the debts dashboard.
"""

# Simulation horizon: nothing is projected beyond 50 years.
MAX_SCHEDULE_MONTHS = 600
MAX_SIMULATION_MONTHS = 600

# Interest-only debts without an end date are serviced for 30 years.
DEFAULT_INTEREST_ONLY_MONTHS = 360
AVERAGE_DAYS_PER_MONTH = 30.44

# Balances at or below one cent count as paid off.
BALANCE_EPSILON = 0.01

DEBT_TYPE_LABELS = {
    "mortgage": "Hypotheek",
    "personal_loan": "Persoonlijke lening",
    "student_loan": "Studielening",
    "car_loan": "Autolening",
    "credit_card": "Creditcard",
    "revolving_credit": "Doorlopend krediet",
    "payment_plan": "Afbetalingsregeling",
    "other": "Overig",
}

REPAYMENT_TYPE_LABELS = {
    "annuity": "Annuïteit",
    "linear": "Lineair",
    "interest_only": "Aflossingsvrij",
}

# Stored records may carry the Dutch form labels or camelCase keys.
REPAYMENT_TYPE_ALIASES = {
    "annuity": "annuity",
    "annuiteit": "annuity",
    "annuïteit": "annuity",
    "linear": "linear",
    "lineair": "linear",
    "interest_only": "interest_only",
    "interestonly": "interest_only",
    "aflossingsvrij": "interest_only",
}

PAYOFF_STRATEGY_LABELS = {
    "avalanche": "Avalanche (hoogste rente eerst)",
    "snowball": "Sneeuwbal (kleinste schuld eerst)",
    "current": "Huidig (ongewijzigd)",
}
