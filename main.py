import argparse
import sys
from typing import Optional, Sequence

from guide_engine.core.config import ConfigurationService
from guide_engine.guide import PatternGuide
from guide_engine.utils.logger import set_debug


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Guide des Design Patterns pour le jeu vidéo : génération, validation, exemples.",
    )
    sub = parser.add_subparsers(dest="command")

    render = sub.add_parser("render", help="Écrit le guide au format Markdown")
    render.add_argument("--output", "-o", type=str, default=None,
                        help="Fichier de sortie (défaut : output_path des paramètres)")
    render.add_argument("--no-output", action="store_true",
                        help="N'inclut pas la sortie console des exemples")

    sub.add_parser("validate", help="Vérifie le catalogue et les ancres du sommaire")
    sub.add_parser("list", help="Liste les fiches et les comparaisons")

    demo = sub.add_parser("demo", help="Exécute l'exemple d'un pattern")
    demo.add_argument("pattern", help="Identifiant ou nom du pattern (ex: abstract_factory)")

    sub.add_parser("gui", help="Ouvre le visualiseur (défaut)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = ConfigurationService()
    set_debug(config.debug_mode)

    if args.command in (None, "gui"):
        # Import local : pygame n'est requis que pour le visualiseur
        from guide_gui.core.app import GuideApp
        from guide_gui.screens.menu_screen import MenuScreen

        app = GuideApp(config=config)
        app.set_screen(MenuScreen(app))
        app.run()
        return 0

    try:
        guide = PatternGuide(config=config)
    except ValueError as e:
        sys.stderr.write(f"{e}\n")
        return 1

    if args.command == "render":
        if args.no_output:
            guide.renderer.include_console_output = False
        path = guide.write(args.output)
        sys.stdout.write(f"Guide généré : {path}\n")
        return 0

    if args.command == "validate":
        report = guide.validate()
        for issue in report.issues:
            sys.stdout.write(f"[{issue.code.value}] {issue.message}\n")
        sys.stdout.write(f"{len(report.issues)} anomalie(s)\n")
        return 0 if report.ok else 1

    if args.command == "list":
        sys.stdout.write("Partie 1 :\n")
        for entry in guide.entries:
            sys.stdout.write(f"  {entry.id:<18} {entry.pattern.value}\n")
        sys.stdout.write("Partie 2 :\n")
        for comparison in guide.comparisons:
            sys.stdout.write(f"  {comparison.id:<32} {comparison.title}\n")
        return 0

    if args.command == "demo":
        try:
            output = guide.run_sample(args.pattern)
        except ValueError as e:
            sys.stderr.write(f"{e}\n")
            return 1
        sys.stdout.write(output)
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
