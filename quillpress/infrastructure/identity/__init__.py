from .users_service_client import UsersServiceClient

__all__ = ["UsersServiceClient"]
