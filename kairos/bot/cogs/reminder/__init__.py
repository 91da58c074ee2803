from typing import TYPE_CHECKING

from .reminder import Reminder

if TYPE_CHECKING:
    from kairos.bot import Kairos


async def setup(bot: "Kairos"):
    await bot.add_cog(Reminder(bot))
