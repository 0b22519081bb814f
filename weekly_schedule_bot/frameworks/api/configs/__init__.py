from weekly_schedule_bot.frameworks.api.configs.fastapi_doc import fastapi_information
from weekly_schedule_bot.frameworks.api.configs.fastapi_doc import fastapi_tags_metadata

__all__ = ["fastapi_information", "fastapi_tags_metadata"]
