import json, argparse, logging

from tkb.config import load_settings
from tkb.parser import parse_answer
from tkb.prompts import get_prompt
from tkb.schema import ObjectKind
from tkb.service import generate


def main(argv=None):

    ap = argparse.ArgumentParser(description="Generate an object or concept with Gemini and save it as JSON")
    ap.add_argument("--kind", choices=[k.value for k in ObjectKind], default=ObjectKind.INSTANCE.value)
    ap.add_argument("--variant", default="default", help="prompt variant (concepts: default|single)")
    ap.add_argument("--infile", help="parse a saved answer text instead of calling Gemini")
    ap.add_argument("--strip_mode", choices=["boundary", "remove"], default="boundary", help="used with --infile")
    ap.add_argument("--outfile", default="object.json")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if args.infile:
        with open(args.infile, encoding="utf-8") as f:
            obj = parse_answer(f.read(), kind=args.kind, strip_mode=args.strip_mode)
    else:
        try:
            get_prompt(args.kind, args.variant)
        except ValueError as e:
            ap.error(str(e))
        obj = generate(args.kind, load_settings(), args.variant)

    with open(args.outfile, "w", encoding="utf-8") as f:
        json.dump(obj.to_wire(), f, indent=2)

    print("Saved:", args.outfile)


if __name__ == "__main__":
    main()
