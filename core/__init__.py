"""
Core signal engine modules.

Provides unified interfaces for:
- Indicator calculations (EMA, RSI, MACD)
- Signal generation (from indicators)
- Configuration (defaults, YAML, environment)
- Price series loading for the CLI
"""
