from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Optional

from intercode.expression_generator import ExpressionTACGenerator
from intercode.base_generator import TACGenerationError, MalformedExpressionError
from intercode.options import TranslationOptions
from intercode.representations import (
    tac_listing,
    quadruple_listing,
    triple_listing,
    indirect_triple_listing
)

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class TranslateRequest(BaseModel):
    expression: str
    result_var: str
    strict: bool = False  # opcional: rechazar caracteres y literales inválidos

class Diagnostic(BaseModel):
    kind: str                       # ErrorKind value, or "tac"
    message: str
    position: Optional[int] = None  # offset en la expresión

class IndirectTripleInfo(BaseModel):
    pointer_table: List[str]
    instruction_table: List[str]

class IntermediateCode(BaseModel):
    tac: List[str]                  # Three address code, numerado desde 1
    quadruples: List[str]
    triples: List[str]              # numerados por posición desde 0
    indirect_triples: IndirectTripleInfo
    instruction_count: int          # Número total de instrucciones
    temporaries_used: int           # Número de temporales utilizados

class TranslateResponse(BaseModel):
    ok: bool
    diagnostics: List[Diagnostic]
    code: Optional[IntermediateCode] = None

@app.post("/translate", response_model=TranslateResponse)
def translate(req: TranslateRequest):
    options = TranslationOptions.strict() if req.strict else TranslationOptions()
    generator = ExpressionTACGenerator(options)

    try:
        instructions = generator.generate_from_source(req.expression, req.result_var)
    except MalformedExpressionError as e:
        diagnostic = Diagnostic(kind=e.kind.value, message=str(e), position=e.position)
        return TranslateResponse(ok=False, diagnostics=[diagnostic])
    except TACGenerationError as e:
        diagnostic = Diagnostic(kind="tac", message=str(e), position=e.position)
        return TranslateResponse(ok=False, diagnostics=[diagnostic])

    stats = generator.get_statistics()
    indirect = indirect_triple_listing(instructions)

    code = IntermediateCode(
        tac=tac_listing(instructions),
        quadruples=quadruple_listing(instructions),
        triples=triple_listing(instructions),
        indirect_triples=IndirectTripleInfo(
            pointer_table=indirect.pointers,
            instruction_table=indirect.instructions
        ),
        instruction_count=stats['instructions_generated'],
        temporaries_used=stats['temporaries_used']
    )
    return TranslateResponse(ok=True, diagnostics=[], code=code)
