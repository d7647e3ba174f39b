"""API endpoints for the quoter."""

import structlog
from fastapi import APIRouter, Depends, HTTPException
from solders.pubkey import Pubkey

from quoter.amm import Account, KeyedAccount, QuoteParams, amm_factory
from quoter.api.schemas import QuoteRequest, QuoteResponse
from quoter.config import QuoterConfig
from quoter.errors import (
    CalculationFailure,
    PoolDecodeError,
    UnsupportedPoolError,
    ValidationError,
)

logger = structlog.get_logger()

router = APIRouter()


def get_config() -> QuoterConfig:
    """Dependency provider for the quoter configuration.

    Override this in tests to inject a specific configuration:
        app.dependency_overrides[get_config] = lambda: QuoterConfig(...)
    """
    return QuoterConfig.from_env()


@router.post("/quote")
async def quote(
    request: QuoteRequest,
    config: QuoterConfig = Depends(get_config),
) -> QuoteResponse:
    """Quote a trade against a single pool account.

    Error Handling:
        - Invalid request schema: 422 (Pydantic)
        - Non-positive amount, zero output, unknown mint: 400
        - Unsupported owner, undecodable pool, calculation failure: 422
        - Liquidity guard tripped and config rejects it: 409
    """
    keyed_account = KeyedAccount(
        key=Pubkey.from_string(request.pool.key),
        account=Account(owner=Pubkey.from_string(request.pool.owner), data=request.pool.data),
    )
    params = QuoteParams(
        amount=request.amount,
        input_mint=Pubkey.from_string(request.input_mint),
        output_mint=Pubkey.from_string(request.output_mint),
        swap_mode=request.swap_mode,
    )

    try:
        amm = amm_factory(keyed_account)
        result = amm.quote(params)
    except ValidationError as e:
        logger.warning("quote_rejected", pool=request.pool.key, error=str(e))
        raise HTTPException(status_code=400, detail=str(e)) from e
    except (UnsupportedPoolError, PoolDecodeError, CalculationFailure) as e:
        logger.warning("quote_failed", pool=request.pool.key, error=str(e))
        raise HTTPException(status_code=422, detail=str(e)) from e

    if result.not_enough_liquidity and config.reject_not_enough_liquidity:
        logger.info(
            "quote_not_enough_liquidity",
            pool=request.pool.key,
            in_amount=result.in_amount,
            out_amount=result.out_amount,
        )
        raise HTTPException(status_code=409, detail="Trade exceeds 50% of pool liquidity")

    return QuoteResponse(
        pool=str(amm.key),
        label=amm.label,
        inAmount=str(result.in_amount),
        outAmount=str(result.out_amount),
        feeAmount=str(result.fee_amount),
        feeMint=str(result.fee_mint),
        feePct=str(result.fee_pct),
        notEnoughLiquidity=result.not_enough_liquidity,
    )
