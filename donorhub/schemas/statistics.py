from donorhub.schemas.common import ApiModel


class DashboardStatistics(ApiModel):
    total_users: int
    total_requests: int
    total_funding: float
