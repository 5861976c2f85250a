"""
Command-line entry point: fetch a Figma frame and write output.html + styles.css.

    figma-to-html <figma_url> [output_dir] [--token TOKEN]
"""
import argparse
import logging
import os
import sys

import requests

from . import settings
from .api import FigmaAPI
from .document import build_html_document
from .exceptions import FigmaError
from .models import ConversionOptions
from .pipeline import import_design


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='figma-to-html',
        description='Convert a Figma frame to HTML and CSS',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            'To get your access token:\n'
            '  Figma Settings > Account > Personal Access Tokens\n'
            'The link may point at a file or at a single frame (node-id=...).\n'
        ),
    )
    parser.add_argument('figma_url', help='Figma file or frame link')
    parser.add_argument('output_dir', nargs='?', default='.', help='Output directory (default: .)')
    parser.add_argument('--token', default=None, help='Figma access token (default: $FIGMA_ACCESS_TOKEN)')
    parser.add_argument('--no-effects', action='store_true', help='Skip shadows and blurs')
    parser.add_argument('--no-auto-layout', action='store_true', help='Treat auto-layout frames as plain boxes')
    parser.add_argument('--no-flexbox', action='store_true', help='Do not emit flexbox declarations')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )

    options = ConversionOptions(
        preserve_auto_layout=not args.no_auto_layout,
        convert_effects=not args.no_effects,
        use_flexbox=not args.no_flexbox,
    )

    print('Fetching Figma file...')

    try:
        api = FigmaAPI(args.token or settings.FIGMA_ACCESS_TOKEN)
        imported = import_design(api, args.figma_url, options)
    except (FigmaError, requests.exceptions.RequestException, ValueError) as e:
        print(f'Error importing Figma design: {e}')
        sys.exit(1)

    result = imported.result

    os.makedirs(args.output_dir, exist_ok=True)
    html_path = os.path.join(args.output_dir, 'output.html')
    css_path = os.path.join(args.output_dir, 'styles.css')

    with open(html_path, 'w', encoding='utf-8') as f:
        f.write(build_html_document(result.html, title=imported.node_name or imported.file_name))

    with open(css_path, 'w', encoding='utf-8') as f:
        f.write(result.css)

    print('✓ Conversion complete!')
    print(f'  - {html_path}')
    print(f'  - {css_path}')
    print(f'\nConverted "{imported.node_name}" from {imported.file_name}')
    if result.images:
        print(f'Image fills: {len(result.images)}')


if __name__ == '__main__':
    main()
