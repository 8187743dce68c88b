#!/usr/bin/env python3
"""Compare two vectors from the command line.

Usage:
    python scripts/compare_vectors.py "2, 1" "1, 3"
    python scripts/compare_vectors.py "1 0 0" "0 1 0" --explain
    python scripts/compare_vectors.py --concepts King Queen --dimensions 5
"""

import argparse
import sys

from cosine_lab.ai import LLMVectorBridge
from cosine_lab.utils.config import load_config, validate_config
from cosine_lab.utils.logger import setup_logging, get_logger
from cosine_lab.vectors import compare_inputs, format_vector


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Cosine similarity of two vectors")
    parser.add_argument("vector_a", nargs="?", help='Vector A, e.g. "2, 1"')
    parser.add_argument("vector_b", nargs="?", help='Vector B, e.g. "1, 3"')
    parser.add_argument(
        "--concepts",
        nargs=2,
        metavar=("CONCEPT_A", "CONCEPT_B"),
        help="Generate both vectors from two concepts with the AI",
    )
    parser.add_argument(
        "--dimensions",
        type=int,
        default=None,
        help="Dimensions of AI-generated vectors (default from config)",
    )
    parser.add_argument("--explain", action="store_true", help="Ask the AI to explain the score")
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the command line calculator."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: Failed to load configuration: {e}")
        sys.exit(1)

    setup_logging(
        log_level=args.log_level or config.logging.level,
        log_dir=None,
    )
    logger = get_logger(__name__)

    for warning in validate_config(config):
        logger.warning(f"Config: {warning}")

    bridge = None
    if args.concepts or args.explain:
        bridge = LLMVectorBridge.from_config(config.llm.to_dict())

    if args.concepts:
        dimensions = args.dimensions or config.ai.default_dimensions
        if dimensions not in config.ai.allowed_dimensions:
            print(f"ERROR: --dimensions must be one of {config.ai.allowed_dimensions}")
            sys.exit(2)

        concept_a, concept_b = args.concepts
        generated = bridge.generate_vectors(concept_a, concept_b, dimensions)
        if generated is None:
            print("ERROR: Failed to generate vectors. Check API Key or try again.")
            sys.exit(1)

        text_a = format_vector(generated.vector_a)
        text_b = format_vector(generated.vector_b)
        print(f"{concept_a}: [{text_a}]")
        print(f"{concept_b}: [{text_b}]")
        if generated.reasoning:
            print(f"Reasoning: {generated.reasoning}")
        print()
    elif args.vector_a is not None and args.vector_b is not None:
        text_a, text_b = args.vector_a, args.vector_b
    else:
        print("ERROR: Provide two vectors or --concepts A B")
        sys.exit(2)

    comparison = compare_inputs(text_a, text_b)
    if not comparison.ok:
        print(f"ERROR: {comparison.error}")
        sys.exit(1)

    result = comparison.result
    print("=" * 50)
    for step in result.formula_steps():
        print(f"  {step}")
    print("=" * 50)
    print(f"Cosine similarity: {result.cosine_similarity:.4f} ({comparison.label})")
    print(f"Angle: {result.angle_degrees:.2f}°  Dimensions: {result.dimensions}")

    if args.explain:
        print()
        print(bridge.explain(comparison.vector_a, comparison.vector_b, result.cosine_similarity))


if __name__ == "__main__":
    main()
