from script_deploy.config.settings import DeployConfig

__all__ = ["DeployConfig"]
