"""
Interest Ledger API Application Factory
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI

from .. import __version__
from ..config import get_config
from ..logging_config import setup_logging
from ..system import BankingSystem
from .transactions import router as transactions_router
from .interest_rules import router as interest_rules_router


def create_app(system: Optional[BankingSystem] = None) -> FastAPI:
    """Create the FastAPI application around one BankingSystem"""
    app = FastAPI(
        title="Interest Ledger API",
        description="Account ledgers and monthly interest statements",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.banking_system = system or BankingSystem()
    
    app.include_router(transactions_router, tags=["Transactions"])
    app.include_router(interest_rules_router, prefix="/interest-rules", tags=["Interest Rules"])
    
    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "interest_ledger_api",
            "version": __version__
        }
    
    return app


def run_server(host: Optional[str] = None, port: Optional[int] = None):
    """Run the API with uvicorn"""
    config = get_config()
    setup_logging(config.log_level, log_format=config.log_format, log_file=config.log_file)
    uvicorn.run(
        create_app(BankingSystem(config)),
        host=host or config.api_host,
        port=port or config.api_port,
        access_log=False
    )
