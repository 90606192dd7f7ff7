from .http_gateway import HttpNotificationGateway

__all__ = ["HttpNotificationGateway"]
