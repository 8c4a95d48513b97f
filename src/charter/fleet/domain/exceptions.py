from charter.shared.domain import ResourceNotFoundException


class AssetNotFoundException(ResourceNotFoundException):
    """機体が存在しない、または予約受付を停止している"""

    error_code = "ASSET_NOT_FOUND"
