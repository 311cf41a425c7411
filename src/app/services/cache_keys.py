"""Cache key layout and expiry for project reads"""


class CacheKeys:
    @staticmethod
    def user_projects(user_id: str) -> str:
        return f"projects:user:{user_id}"

    @staticmethod
    def project_detail(project_id: str) -> str:
        return f"project:{project_id}"


class CacheTTL:
    USER_PROJECTS = 300
    PROJECT_DETAIL = 120


def is_pattern(key: str) -> bool:
    return "*" in key
