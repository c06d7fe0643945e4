from prometheus_client import Counter, Gauge

AUTHORIZATION_CHECKS_COUNTER = Counter(
    'rbac_authorization_checks_total',
    'Total number of role/action authorization checks',
    ['result']
)

REGISTERED_ROLES_GAUGE = Gauge(
    'rbac_registered_roles',
    'Number of roles in the authorization table the API serves'
)
