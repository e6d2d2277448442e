"""
Configuração da cafeteria lida do ambiente (.env)
"""
import os
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Configurações validadas da aplicação"""
    shop_name: str = "Cafeteria"
    discount_chain_forwarding: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validar_log_level(cls, value: str) -> str:
        nivel = value.strip().upper()
        if nivel not in LOG_LEVELS:
            raise ValueError(f"Nível de log inválido. Níveis válidos: {list(LOG_LEVELS)}")
        return nivel


def get_settings() -> Settings:
    """Monta as configurações a partir das variáveis de ambiente"""
    return Settings(
        shop_name=os.getenv("CAFETERIA_SHOP_NAME", "Cafeteria"),
        # pydantic converte "true"/"1"/"yes" para bool
        discount_chain_forwarding=os.getenv("CAFETERIA_DISCOUNT_CHAIN_FORWARDING", "false"),
        log_level=os.getenv("CAFETERIA_LOG_LEVEL", "WARNING")
    )
