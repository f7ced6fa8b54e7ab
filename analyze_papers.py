#!/usr/bin/env python3
"""
Analyze research-paper PDFs and optionally generate implementations of their algorithms.

Behavior:
- Extracts text from each PDF (pdfminer.six).
- Detects sections, title, ranked algorithm/pseudocode blocks, keywords and a
  topical classification for each paper.
- With --generate, prompts an OpenAI-compatible model for an implementation and
  writes it, a README and analysis.json under --out.

Usage:
  python analyze_papers.py papers/                      # analyze every PDF in a directory
  python analyze_papers.py paper.pdf --generate         # analyze + generate code
  python analyze_papers.py papers/ --report output/REPORT.md --workers 4

Required env vars (for --generate):
  OPENAI_API_KEY          -> API key for the model provider

Optional env vars:
  OPENAI_MODEL            -> default: gpt-4o-mini
  OPENAI_BASE_URL         -> OpenAI-compatible endpoint (e.g. http://localhost:11434/v1 for Ollama)
  PAPER2CODE_DEBUG_TRACE  -> print tracebacks for failures
"""

from __future__ import annotations

import argparse
import json
import os
import traceback
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import nltk
from dotenv import load_dotenv
from tqdm import tqdm

from paperlib.content_analysis import analyze_paper, degraded_analysis
from paperlib.errors import EmptyInputError
from paperlib.generation import generate_implementation, save_implementation
from paperlib.models import Paper, PaperAnalysis
from paperlib.pdf_extract import extract_paper_from_pdf
from paperlib.report import build_markdown, render_analysis
from paperlib.text_clean import ensure_text, title_from_filename

# Load environment variables from root .env if it exists
load_dotenv(Path(__file__).parent / ".env")


def _truthy_env(name: str) -> bool:
    v = os.environ.get(name, "").strip().lower()
    return v not in {"", "0", "false", "no", "off"}


def _format_exc(e: Exception) -> str:
    msg = str(e).strip()
    if msg:
        return f"{type(e).__name__}: {msg}"
    return type(e).__name__


def _report_error(stage: str, pdf: Path, e: Exception) -> None:
    tqdm.write(f"[ERROR] {stage} failed for {pdf.name}: {_format_exc(e)}")
    if _truthy_env("PAPER2CODE_DEBUG_TRACE"):
        tqdm.write(traceback.format_exc())


# nltk.data resource path -> downloader package id
TAGGER_MODELS: dict[str, str] = {
    "taggers/averaged_perceptron_tagger_eng": "averaged_perceptron_tagger_eng",
    "taggers/averaged_perceptron_tagger": "averaged_perceptron_tagger",
}


def ensure_tagger_model() -> bool:
    """
    Make the NLTK part-of-speech tagger available, downloading it once if missing.

    Returns: True if a tagger model is installed afterwards.
    """
    for resource in TAGGER_MODELS:
        try:
            nltk.data.find(resource)
            return True
        except LookupError:
            continue

    for package in TAGGER_MODELS.values():
        nltk.download(package, quiet=True)
    for resource in TAGGER_MODELS:
        try:
            nltk.data.find(resource)
            return True
        except LookupError:
            continue
    return False


def collect_pdfs(path: Path) -> list[Path]:
    if path.is_file():
        return [path]
    return sorted(path.glob("*.pdf"))


def fallback_title(paper: Paper) -> str:
    """Document-info title if present, else the file name."""
    meta_title = paper.metadata.get("title")
    if meta_title and meta_title.lower() not in {"untitled", "title"}:
        return meta_title
    return title_from_filename(paper.pdf_path)


def analyze_one(
    pdf: Path,
    max_pages: int | None = None,
    executor: ThreadPoolExecutor | None = None,
) -> PaperAnalysis:
    """
    Extract and analyze one PDF.

    Raises: EmptyInputError when no text could be extracted.
    """
    paper = extract_paper_from_pdf(pdf, max_pages=max_pages)
    text = ensure_text(paper.text)
    if len(text) < 500:
        tqdm.write(
            f"[WARN] Very little text extracted for {pdf.name} "
            f"(chars={len(text)}). It may be scanned or protected."
        )
    return analyze_paper(text, fallback_title=fallback_title(paper), executor=executor)


def analyze_all(
    pdfs: list[Path],
    max_pages: int | None = None,
    workers: int = 0,
) -> list[PaperAnalysis]:
    analyses: list[PaperAnalysis] = []
    failures = 0
    executor = ThreadPoolExecutor(max_workers=workers) if workers > 0 else None

    try:
        for pdf in tqdm(pdfs, desc="Analyzing PDFs"):
            try:
                analyses.append(analyze_one(pdf, max_pages=max_pages, executor=executor))
            except EmptyInputError:
                failures += 1
                tqdm.write(f"[WARN] No extractable text in {pdf.name}; using a degraded analysis")
                analyses.append(degraded_analysis(title_from_filename(pdf)))
            except Exception as e:
                failures += 1
                _report_error("analyze", pdf, e)
                analyses.append(degraded_analysis(title_from_filename(pdf)))
    finally:
        if executor is not None:
            executor.shutdown()

    if failures:
        tqdm.write(f"[WARN] Analysis failures: {failures}/{len(pdfs)} PDFs")
    return analyses


def generate_all(
    pdfs: list[Path],
    analyses: list[PaperAnalysis],
    out_dir: Path,
    language: str,
) -> int:
    """Generate and save implementations. Returns the number of failures."""
    failures = 0
    for pdf, analysis in tqdm(list(zip(pdfs, analyses)), desc="Generating code"):
        if not analysis.sections:
            save_implementation(out_dir, analysis)
            continue
        try:
            generated = generate_implementation(analysis, language=language)
        except Exception as e:
            failures += 1
            _report_error("generate", pdf, e)
            save_implementation(out_dir, analysis)
            continue
        target = save_implementation(out_dir, analysis, generated)
        tqdm.write(f"[INFO] Wrote implementation for {pdf.name} -> {target}")
    if failures:
        tqdm.write(f"[WARN] Generation failures: {failures}/{len(pdfs)} PDFs")
    return failures


def main() -> int:
    """Main entry point."""
    ap = argparse.ArgumentParser()
    ap.add_argument("path", help="A PDF file or a directory containing PDFs")
    ap.add_argument("--out", default="generated", help="Output directory (default: generated)")
    ap.add_argument("--max-pages", type=int, default=0, help="Limit pages per PDF (0 = all pages)")
    ap.add_argument(
        "--generate",
        action="store_true",
        help="Generate an implementation with the configured model",
    )
    ap.add_argument("--language", default="python", help="Target language for --generate (default: python)")
    ap.add_argument("--json", action="store_true", help="Print analyses as JSON instead of text")
    ap.add_argument("--report", default=None, help="Also write a combined markdown report to this path")
    ap.add_argument(
        "--workers",
        type=int,
        default=0,
        help="Threads for the independent analysis stages (0 = sequential)",
    )
    args = ap.parse_args()

    path = Path(args.path)
    out_dir = Path(args.out)
    max_pages = None if args.max_pages == 0 else args.max_pages

    if not path.exists():
        raise SystemExit(f"path not found: {path}")
    pdfs = collect_pdfs(path)
    if not pdfs:
        raise SystemExit(f"no PDFs found in: {path}")

    if not ensure_tagger_model():
        tqdm.write("[WARN] NLTK tagger model unavailable; keywords will be empty")

    analyses = analyze_all(pdfs, max_pages=max_pages, workers=args.workers)

    if args.json:
        print(json.dumps([a.to_dict() for a in analyses], indent=2, ensure_ascii=False))
    else:
        for pdf, analysis in zip(pdfs, analyses):
            print(f"=== {pdf.name}")
            print(render_analysis(analysis))
            print()

    if args.report:
        report_path = Path(args.report)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(build_markdown(analyses), encoding="utf-8")
        print(f"Wrote: {report_path}")

    if args.generate:
        if generate_all(pdfs, analyses, out_dir, args.language):
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
