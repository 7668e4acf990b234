from flowinject.shared.logger.john_wick_logger import JohnWickLogger, create_logger

__all__ = ["JohnWickLogger", "create_logger"]
