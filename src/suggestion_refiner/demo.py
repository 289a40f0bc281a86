# src/suggestion_refiner/demo.py
import argparse
import json
import sys


def _parse_candidate(raw: str, default_locale):
    """Parse TEXT:SCORE[:KIND[:LOCALE]] into a Candidate."""
    from .suggest import Candidate, CandidateKind, Locale, SourceDictionary

    parts = raw.split(":")
    if len(parts) < 2:
        raise argparse.ArgumentTypeError(f"expected TEXT:SCORE[:KIND[:LOCALE]], got {raw!r}")
    text, score = parts[0], int(parts[1])
    kind = CandidateKind[parts[2].upper()] if len(parts) > 2 and parts[2] else CandidateKind.CORRECTION
    locale = Locale.parse(parts[3]) if len(parts) > 3 and parts[3] else default_locale
    return Candidate(text, score, kind, SourceDictionary(SourceDictionary.MAIN, locale))


def main():
    """CLI demo: post-process a fixed candidate list for a typed word and print the result."""
    from .suggest import CapsMode, InputStyle, Locale, StaticLookup, Suggest, TypedWordState
    from .suggest.config import load_suggest_config

    parser = argparse.ArgumentParser(
        prog="suggest-demo",
        description="Post-process raw lookup candidates into a suggestion strip.",
    )
    parser.add_argument("typed", nargs="?", default="", help="Typed word (empty = prediction)")
    parser.add_argument(
        "-c",
        "--candidate",
        action="append",
        default=[],
        help="Raw candidate TEXT:SCORE[:KIND[:LOCALE]], best first (repeatable)",
    )
    parser.add_argument("--locale", default="en_US", help="Default dictionary locale")
    parser.add_argument("--caps", choices=[m.value for m in CapsMode], default="off")
    parser.add_argument("--batch", action="store_true", help="Gesture (batch) request")
    parser.add_argument("--rejected", default=None, help="Previously rejected gesture suggestion")
    parser.add_argument(
        "--threshold",
        default=None,
        help="Auto-correction threshold: float or preset name (modest, aggressive, ...)",
    )
    parser.add_argument("--no-correction", action="store_true", help="Disable auto-correction")
    parser.add_argument("--resumed", action="store_true", help="Resumed composition")
    parser.add_argument("--no-main-dict", action="store_true", help="Pretend no main dictionary")

    args = parser.parse_args()

    try:
        config = load_suggest_config()
        locale = Locale.parse(args.locale)
        candidates = [_parse_candidate(c, locale) for c in args.candidate]
        suggest = Suggest(
            StaticLookup(candidates, locale=locale, has_main_dictionary=not args.no_main_dict),
            config,
        )
        if args.threshold is not None:
            try:
                suggest.set_auto_correction_threshold(float(args.threshold))
            except ValueError:
                suggest.set_auto_correction_threshold(config.threshold_for(args.threshold))

        state = TypedWordState(
            text=args.typed,
            caps_mode=CapsMode(args.caps),
            is_resumed=args.resumed,
            is_batch_mode=args.batch,
            rejected_batch_suggestion=args.rejected,
        )
        result = suggest.get_suggested_words(
            state,
            is_correction_enabled=not args.no_correction,
            input_style=InputStyle.TAIL_BATCH if args.batch else InputStyle.TYPING,
        )
        out = {
            "suggestions": [
                {"text": c.text, "score": c.score, "kind": c.kind.value, "debug": c.debug_string}
                for c in result.suggestions
            ],
            "typed_word_valid": result.typed_word_valid,
            "will_auto_correct": result.will_auto_correct,
            "input_style": result.input_style.value,
            "sequence_number": result.sequence_number,
        }
        print(json.dumps(out, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
