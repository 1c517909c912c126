from __future__ import annotations

import logging
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uvicorn

from config import CONFIG
from errors import ReceiptValidationError, StructuralParseError
from models import ErrorResponse, PointsResponse, ReceiptIdResponse, parseReceipt
from points import calculatePoints
from storage import ReceiptStorage
from validate import validateReceipt

logger = logging.getLogger("ReceiptLogger")

NOT_FOUND_DETAIL = "No receipt found for that ID."


def setupLogging() -> None:
    """Attach the rotating log file handler to the receipt logger, once."""
    if logger.handlers:
        return

    logFilePath = Path(CONFIG["logFilePath"])
    logFilePath.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=logFilePath,
        maxBytes=CONFIG["logMaxBytes"],
        backupCount=CONFIG["logBackupCount"],
    )

    formatter = logging.Formatter("%(message)s")
    handler.setFormatter(formatter)

    logger.setLevel(CONFIG["logLevel"])
    logger.addHandler(handler)


async def customRequestValidationExceptionHandler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Custom handler for request bodies FastAPI could not decode.

    Args:
        request: The incoming request.
        exc: The exception raised.

    Returns:
        JSONResponse: The error response.
    """
    logger.error("Request validation error: %s", exc)
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid structure or missing fields in the input."},
    )


async def structuralParseExceptionHandler(request: Request, exc: StructuralParseError) -> JSONResponse:
    """Handler for receipts whose fields could not be decoded."""
    logger.error("Structural parse error on %s: %s", exc.field, exc.message)
    return JSONResponse(status_code=400, content={"detail": exc.message})


async def receiptValidationExceptionHandler(request: Request, exc: ReceiptValidationError) -> JSONResponse:
    """Handler for receipts that decoded but break a format rule."""
    logger.error("Receipt validation error: %s", exc.message)
    return JSONResponse(status_code=400, content={"detail": exc.message})


def createApp(storage: Optional[ReceiptStorage] = None) -> FastAPI:
    """
    Build the receipt processor application.

    Args:
        storage (Optional[ReceiptStorage]): The store to keep receipts in.
            A new, empty store is created when omitted.

    Returns:
        FastAPI: The configured application.
    """
    setupLogging()

    application = FastAPI(title="Receipt Processor")
    application.state.receiptStorage = storage if storage is not None else ReceiptStorage()

    application.add_exception_handler(RequestValidationError, customRequestValidationExceptionHandler)
    application.add_exception_handler(StructuralParseError, structuralParseExceptionHandler)
    application.add_exception_handler(ReceiptValidationError, receiptValidationExceptionHandler)

    @application.post(
        "/receipts/process",
        response_model=ReceiptIdResponse,
        responses={400: {"model": ErrorResponse, "description": "The receipt is invalid."}},
    )
    async def processReceipt(request: Request, payload: Dict[str, Any] = Body(...)) -> ReceiptIdResponse:
        """
        Process a new receipt, generate a unique receipt ID, and store the receipt data.

        Args:
            payload (Dict[str, Any]): The decoded JSON request body.

        Returns:
            ReceiptIdResponse: A response containing the unique receipt ID.
        """
        receipt = parseReceipt(payload)
        validateReceipt(receipt)

        receiptId = str(uuid.uuid4())
        request.app.state.receiptStorage.setReceipt(receiptId, receipt)

        logger.info("Received receipt: %s", receipt.model_dump())
        logger.info("Receipt processed with ID: %s", receiptId)

        return ReceiptIdResponse(id=receiptId)

    @application.get(
        "/receipts/{receiptId}/points",
        response_model=PointsResponse,
        responses={404: {"model": ErrorResponse, "description": NOT_FOUND_DETAIL}},
    )
    async def getPoints(request: Request, receiptId: str):
        """
        Get the points for a specific receipt based on the receipt ID.

        Args:
            receiptId (str): The unique ID of the receipt.

        Returns:
            PointsResponse: A response model containing the calculated points,
            or a 404 JSONResponse if the ID is malformed or unknown.
        """
        try:
            canonicalId = str(uuid.UUID(receiptId))
        except ValueError:
            logger.error("Malformed receipt ID: %s", receiptId)
            return JSONResponse(status_code=404, content={"detail": NOT_FOUND_DETAIL})

        receipt = request.app.state.receiptStorage.getReceipt(canonicalId)
        if receipt is None:
            logger.error("Receipt not found with ID: %s", receiptId)
            return JSONResponse(status_code=404, content={"detail": NOT_FOUND_DETAIL})

        totalPoints = calculatePoints(receipt)

        logger.info("Points calculated for receipt ID %s: %d points", receiptId, totalPoints)

        return PointsResponse(points=totalPoints)

    return application


app = createApp()


def main() -> None:
    uvicorn.run(app, host=CONFIG["host"], port=CONFIG["port"])


if __name__ == "__main__":
    main()
