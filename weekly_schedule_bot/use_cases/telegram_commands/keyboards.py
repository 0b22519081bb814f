from __future__ import annotations

from telegram import InlineKeyboardButton
from telegram import InlineKeyboardMarkup

WEEK_STATUS_CALLBACK = "menu:week_status"
HELP_CALLBACK = "menu:help"
SCHEDULE_VIEW_CALLBACK = "schedule:view:full"


def main_menu_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        [
            [InlineKeyboardButton("🔄 وضعیت هفته و برنامه امروز", callback_data=WEEK_STATUS_CALLBACK)],
            [InlineKeyboardButton("📅 مشاهده برنامه کامل", callback_data=SCHEDULE_VIEW_CALLBACK)],
            [InlineKeyboardButton("ℹ️ راهنما", callback_data=HELP_CALLBACK)],
        ]
    )


def week_status_keyboard(is_private: bool) -> InlineKeyboardMarkup:
    if not is_private:
        return InlineKeyboardMarkup(
            [[InlineKeyboardButton("🔄 بروزرسانی وضعیت", callback_data=WEEK_STATUS_CALLBACK)]]
        )
    return InlineKeyboardMarkup(
        [
            [InlineKeyboardButton("🔄 بروزرسانی", callback_data=WEEK_STATUS_CALLBACK)],
            [InlineKeyboardButton("📅 مشاهده برنامه کامل", callback_data=SCHEDULE_VIEW_CALLBACK)],
            [InlineKeyboardButton("↩️ بازگشت به منوی اصلی", callback_data=HELP_CALLBACK)],
        ]
    )


def back_to_menu_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        [[InlineKeyboardButton("↩️ بازگشت به منوی اصلی", callback_data=HELP_CALLBACK)]]
    )
