from fastapi import FastAPI, Header, HTTPException
from pydantic import BaseModel
from typing import List, Optional
import re

app = FastAPI(title="Mock Text Generation Server", version="1.0.0")


class Part(BaseModel):
    text: str = ""


class Content(BaseModel):
    parts: List[Part] = []


class GenerateRequest(BaseModel):
    contents: List[Content]


@app.get("/health")
def health(): return {"status": "ok"}

@app.post("/v1beta/models/{model}:generateContent")
def generate_content(model: str, body: GenerateRequest, x_goog_api_key: Optional[str] = Header(default=None)):
    if not x_goog_api_key:
        raise HTTPException(status_code=401, detail="API key missing")
    prompt = "".join(part.text for content in body.contents for part in content.parts)
    if model == "unavailable":
        raise HTTPException(status_code=503, detail="model overloaded")
    match = re.search(r"Final credit score: (\d+)", prompt)
    score = match.group(1) if match else "unknown"
    return {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": f"[{model}] Your credit score is {score}."}]}}
        ]
    }
