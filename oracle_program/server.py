# oracle_program/server.py
"""
Oracle Program: local host
Both stages behind a small FastAPI application, for running the program
outside the execution VM (integration tests, dry runs, operator checks).

  POST /execute  {"inputs": hex, "variant": "ltv" | "price" | null}
  POST /tally    {"inputs": hex, "reveals": [{exit_code, gas_used, in_consensus, result}]}
  GET  /health
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel
import uvicorn

from oracle_program import __version__
from oracle_program.config import ORACLE_HOST, ORACLE_PORT, Settings
from oracle_program.execution import VARIANTS, execution_phase
from oracle_program.models import Reveal
from oracle_program.tally import tally_phase

log = logging.getLogger("oracle-program.server")


class RevealBody(BaseModel):
    exit_code: int = 0
    gas_used: int = 0
    in_consensus: bool = True
    result: str = ""


class ExecuteRequest(BaseModel):
    inputs: str = ""
    variant: Optional[str] = None


class TallyRequest(BaseModel):
    inputs: str = ""
    reveals: List[RevealBody] = []


def _unhex(value, what):
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"{what} is not valid hex")


def create_app(fetcher=None, settings=None):
    settings = settings or Settings.from_env()
    app = FastAPI(
        title="Oracle Program",
        description="Execution and tally stages of the price / LTV oracle program",
        version=__version__,
    )

    @app.post("/execute")
    def execute(req: ExecuteRequest):
        if req.variant is not None and req.variant not in VARIANTS:
            raise HTTPException(status_code=400, detail=f"unknown variant: {req.variant}")
        inputs = _unhex(req.inputs, "inputs")
        result = execution_phase(
            inputs,
            fetcher=fetcher,
            variant=req.variant,
            settings=settings,
        )
        return JSONResponse(result.to_dict())

    @app.post("/tally")
    def tally(req: TallyRequest):
        inputs = _unhex(req.inputs, "inputs")
        reveals = [
            Reveal(
                exit_code=r.exit_code,
                gas_used=r.gas_used,
                in_consensus=r.in_consensus,
                result=_unhex(r.result, f"reveals[{i}].result"),
            )
            for i, r in enumerate(req.reveals)
        ]
        return JSONResponse(tally_phase(inputs, reveals).to_dict())

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "version": __version__,
            "variants": sorted(VARIANTS),
        }

    return app


app = create_app()


def serve(host=ORACLE_HOST, port=ORACLE_PORT):
    log.info(f"Oracle Program v{__version__} starting on {host}:{port}")
    for name, cfg in VARIANTS.items():
        log.info(f"  variant {name} (default market {cfg['default']})")
    uvicorn.run(create_app(), host=host, port=port)
