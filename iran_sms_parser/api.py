import logging
from decimal import Decimal
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from .bank.bank_parser_factory import BankParserFactory
from .constants import Constants
from .parsed_transaction import ParsedTransaction

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Iranian Bank SMS Parser API",
    description="API for parsing Iranian banking SMS messages into structured transaction data.",
    version="1.0.0"
)

class SMSRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(default=None, alias="_id")
    date: int = 0
    address: str
    body: str
    type: Optional[str] = None

class ParseResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(default=None, alias="_id")
    amount: Optional[Decimal] = None
    type: Optional[str] = None
    merchant: Optional[str] = None
    reference: Optional[str] = None
    account_last4: Optional[str] = None
    balance: Optional[Decimal] = None
    balance_parsed: bool = False
    bank_name: Optional[str] = None
    is_from_card: bool = False
    currency: str = Constants.Currency.IRR
    transaction_id: Optional[str] = None
    status: str = "parsed"

class BankInfo(BaseModel):
    id: str
    name: str
    currency: str

def format_parsed_txn(parsed_txn: ParsedTransaction, request_id: Optional[int]) -> ParseResponse:
    return ParseResponse(
        id=request_id,
        amount=parsed_txn.amount,
        type=parsed_txn.type.value,
        merchant=parsed_txn.merchant,
        reference=parsed_txn.reference,
        account_last4=parsed_txn.account_last4,
        balance=parsed_txn.balance,
        balance_parsed=parsed_txn.balance_parsed,
        bank_name=parsed_txn.bank_name,
        is_from_card=parsed_txn.is_from_card,
        currency=parsed_txn.currency,
        transaction_id=parsed_txn.generate_transaction_id(),
        status="success",
    )

@app.post("/parse", response_model=ParseResponse, response_model_by_alias=True)
async def parse_sms(request: SMSRequest):
    """
    Parse a single SMS message.
    """
    parser = BankParserFactory.get_parser(request.address)
    if not parser:
        raise HTTPException(status_code=404, detail=f"No parser found for sender: {request.address}")

    parsed_txn = parser.parse(request.body, request.address, request.date)
    if not parsed_txn:
        raise HTTPException(status_code=422, detail="Could not extract transaction data from the SMS body.")

    logger.info("Parsed %s transaction from %s", parsed_txn.type.value, parser.get_bank_name())
    return format_parsed_txn(parsed_txn, request.id)

@app.post("/parse-batch", response_model=List[dict])
async def parse_sms_batch(requests: List[SMSRequest]):
    """
    Parse multiple SMS messages in one request.
    """
    results = []
    for request in requests:
        parser = BankParserFactory.get_parser(request.address)
        if not parser:
            results.append({
                "_id": request.id,
                "status": "error",
                "message": f"No parser found for sender: {request.address}"
            })
            continue

        parsed_txn = parser.parse(request.body, request.address, request.date)
        if not parsed_txn:
            results.append({
                "_id": request.id,
                "status": "unparsed",
                "message": "Could not extract transaction data."
            })
            continue

        results.append(format_parsed_txn(parsed_txn, request.id).model_dump(mode="json", by_alias=True))

    logger.info("Batch of %d messages, %d parsed", len(requests),
                sum(1 for r in results if r["status"] == "success"))
    return results

@app.get("/banks", response_model=List[BankInfo])
async def list_banks():
    return [
        BankInfo(id=parser.BANK_ID, name=parser.get_bank_name(), currency=parser.get_currency())
        for parser in BankParserFactory.get_all_parsers()
    ]

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

def run():
    uvicorn.run(app, host=Constants.Api.HOST, port=Constants.Api.PORT)

if __name__ == "__main__":
    run()
