# pw_audit: 密码策略审计工具 (password-policy audit toolkit)

from .pw_analy import (
    HashStatistics,
    PasswordStatistics,
    analyze_hashes,
    analyze_passwords,
    evaluate_global_risk,
    fill_hash_fallback,
)
from .pw_errors import InsufficientDataError, PwAuditError
from .pw_hashes import username_as_password
from .pw_risk import evaluate_risk, percent

__version__ = "0.3.0"
