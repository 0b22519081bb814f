"""User facing texts of the bot (Persian, Telegram legacy Markdown)."""

from __future__ import annotations

WELCOME_PRIVATE = """سلام {first_name}! 👋

به ربات مدیریت برنامه هفتگی و وضعیت دانشگاه خوش آمدید. 🎓

*امکانات اصلی:*
🔄 *وضعیت هفته:* نمایش زوج/فرد بودن هفته و برنامه امروز شما.
📅 *برنامه شما:* مشاهده برنامه هفتگی زوج و فرد.
⚙️ *تنظیم برنامه:* افزودن و حذف کلاس‌ها با دستورات /add\\_lesson و /delete\\_lesson.
🔮 *تلپورت:* وضعیت هفته در یک تاریخ آینده.

👇 از دکمه‌های زیر استفاده کنید:"""

WELCOME_GROUP = """سلام! 👋 من ربات وضعیت هفته هستم.
برای دیدن وضعیت از /week استفاده کنید.
برای تنظیم برنامه شخصی، لطفاً در چت خصوصی با من (@{bot_username}) صحبت کنید."""

HELP = """🔰 *راهنمای ربات برنامه هفتگی* 🔰

*دستورات و دکمه‌ها:*
🔄 */week* یا دکمه *وضعیت هفته*: نمایش زوج/فرد بودن هفته فعلی/بعدی + برنامه امروز شما (در خصوصی).
📊 */status*: فقط وضعیت هفته فعلی.
📚 */today*: برنامه امروز شما.
📅 */schedule* یا دکمه *مشاهده برنامه*: نمایش برنامه کامل هفته‌های زوج و فرد.
🔮 */teleport* `1403/08/25`: بررسی وضعیت هفته در تاریخ آینده.

*مدیریت برنامه (فقط خصوصی):*
➕ `/add_lesson فرد شنبه نام درس - 8:00 - 10:00 - محل`
🗑️ `/delete_lesson فرد شنبه 1`
🧹 `/clear_day زوج دوشنبه`، `/clear_week فرد` و `/clear_schedule`
ℹ️ */help*: نمایش همین پیام."""

WEEK_STATUS = """{persian_date}

{current_emoji} هفته فعلی: *{current_label}* است
{next_emoji} هفته بعدی: *{next_label}* خواهد بود

"""
WEEK_STATUS_ERROR = "❌ {persian_date}\n\nخطا در محاسبه وضعیت هفته: {status}"
STATUS_LINE = "{persian_date}\n\n📊 وضعیت هفته فعلی: {status}"

TODAY_HEADER = "📅 *برنامه امروز ({day_name}):*\n\n"
NO_SCHEDULE_TODAY = "🗓️ شما برای امروز ({day_name}) در هفته *{status}* برنامه‌ای تنظیم نکرده‌اید."
WEEKEND_MESSAGE = "🥳 امروز {day_name} است! آخر هفته خوبی داشته باشید."
LESSON_LINE = "{index}. {slot}*{lesson}*\n   ⏰ {start_time}-{end_time} | 📍 {location}\n"

TELEPORT_PROMPT = "🔮 لطفاً تاریخ شمسی مورد نظر را به فرمت `سال/ماه/روز` ارسال کنید (مثال: `/teleport 1403/08/25`)."
TELEPORT_INVALID = """⚠️ تاریخ وارد شده نامعتبر است.
فرمت: `سال/ماه/روز` (مثال: `/teleport 1404/02/10`)"""
TELEPORT_PAST = "🕰 این تاریخ در گذشته است. لطفاً تاریخی در آینده وارد کنید."
TELEPORT_RESULT = """🔮 *تلپورت به آینده*

📅 تاریخ: {day} {month_name} {year}
📊 وضعیت هفته: *{status}*

"""
TELEPORT_DAY_HEADER = "📚 برنامه آن روز ({day_name}):\n\n"
TELEPORT_FREE_DAY = "🎉 در آن روز کلاسی ندارید!"
TELEPORT_WEEKEND = "🥳 آن روز آخر هفته است!"

SCHEDULE_TITLE = "📅 *برنامه هفتگی شما*\n"
SCHEDULE_WEEK_HEADER = "\n{emoji} *هفته {label}*\n"
SCHEDULE_DAY_HEADER = "\n🗓️ *{day_name}*\n"
SCHEDULE_IDLE_LINE = "   ⏳ زمان خالی: {idle}\n"
NO_SCHEDULE = "_هنوز هیچ درسی برای هیچ هفته‌ای تنظیم نکرده‌اید._"

ADD_LESSON_USAGE = """⚠️ فرمت وارد شده صحیح نیست. لطفاً با فرمت زیر وارد کنید:
`/add_lesson <فرد|زوج> <روز> نام درس - ساعت شروع - ساعت پایان - محل برگزاری`
مثال: `/add_lesson فرد شنبه برنامه سازی پیشرفته - 8:00 - 10:00 - کلاس 309`"""
DELETE_LESSON_USAGE = "⚠️ فرمت: `/delete_lesson <فرد|زوج> <روز> <شماره درس>`"
CLEAR_DAY_USAGE = "⚠️ فرمت: `/clear_day <فرد|زوج> <روز>`"
CLEAR_WEEK_USAGE = "⚠️ فرمت: `/clear_week <فرد|زوج>`"
INVALID_TIME = "⚠️ فرمت زمان باید به صورت `HH:MM` باشد. مثال: `08:30` یا `13:45`"
INVALID_TIME_ORDER = "⚠️ ساعت شروع باید قبل از ساعت پایان و معتبر باشد."
CLASS_ADDED = "✅ درس با موفقیت اضافه شد."
CLASS_DELETED = "✅ درس با موفقیت حذف شد."
LESSON_NOT_FOUND = "⚠️ درسی با این شماره در آن روز پیدا نشد."
DAY_CLEARED = "✅ برنامه روز {day_name} در هفته {label} حذف شد."
DAY_ALREADY_EMPTY = "ℹ️ برای روز {day_name} در هفته {label} درسی ثبت نشده است."
WEEK_CLEARED = "✅ تمام برنامه هفته {label} حذف شد."
WEEK_ALREADY_EMPTY = "ℹ️ برای هفته {label} درسی ثبت نشده است."
SCHEDULE_CLEARED = "✅ کل برنامه شما حذف شد."

PRIVATE_ONLY = "⚠️ مدیریت برنامه هفتگی فقط در چت خصوصی با من (@{bot_username}) امکان‌پذیر است."
ERROR_OCCURRED = "⚠️ متاسفانه مشکلی پیش آمد."

ADMIN_ONLY = "⛔️ این دستور مخصوص ادمین و فقط در چت خصوصی قابل استفاده است."
STATS = """📊 *آمار ربات*

📅 وضعیت هفته فعلی: *{status}*
🗓️ کاربران با برنامه: {schedules}"""
