"""Tuesday Countdown Package.

Replies to any message mentioning Tuesday with how long is left until the next one.

Components:
- constants: Duration unit and metric prefix tables
- units: Unit/multiplier extraction from message text
- countdown: Next-weekday date arithmetic and reply formatting
- helpers: Role mention resolution
- cog: Discord listener and commands
"""

from .cog import TuesdayCog

async def setup(bot):
    """Load the Tuesday cog.
    
    Args:
        bot: Discord bot instance
    """
    await bot.add_cog(TuesdayCog(bot))
