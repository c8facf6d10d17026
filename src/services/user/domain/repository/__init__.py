from .user_repository import UserRepository as UserRepository
