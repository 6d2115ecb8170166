"""Balance endpoint (requires a session cookie)."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from kodbank.api.auth import get_current_claims
from kodbank.core.database import get_db
from kodbank.core.security import SessionClaims
from kodbank.schemas.account import BalanceResponse
from kodbank.services.accounts import get_balance

router = APIRouter()


@router.get("/getBalance", response_model=BalanceResponse)
def read_balance(
    claims: Annotated[SessionClaims, Depends(get_current_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> BalanceResponse:
    """Return the balance of the account identified by the token's account id."""
    return BalanceResponse(balance=get_balance(db, claims.account_id))
