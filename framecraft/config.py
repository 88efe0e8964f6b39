from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./framecraft.db"
    SHOP_NAME: str = "FrameCraft Custom Framing"

    # Quote defaults: Houston Heights shop rates
    LABOR_COST_DEFAULT: float = 38.00
    OVERHEAD_COST_DEFAULT: float = 54.00
    TAX_RATE_DEFAULT: float = 0.0825   # 8.25% Texas sales tax
    MAT_WIDTH_DEFAULT: float = 2.0     # inches of mat border per side

    # Retail market adjustments applied after the sliding-scale markup
    FRAME_MARKET_ADJUSTMENT: float = 0.1667
    GLAZING_MARKET_ADJUSTMENT: float = 0.45

    SEED_CATALOG_ON_STARTUP: bool = True

    class Config:
        env_file = ".env"


settings = Settings()
