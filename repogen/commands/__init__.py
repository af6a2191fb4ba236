from .create import command as create_cmd

__all__ = ['create_cmd']
