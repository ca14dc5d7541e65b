#!/usr/bin/env python3
import json
import argparse
import logging
import sys
from dataclasses import replace

from .config_manager import get_config_from_env
from .data_models import summarize_part
from .exceptions import MimeError
from .mime_part import MimePart

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description='AS2 MIME structure and payload classifier')
    parser.add_argument('files', nargs='+', help='Raw MIME message files to parse')
    parser.add_argument('-o', '--output', help='Output JSON file')
    parser.add_argument('--compact', action='store_true', help='Compact JSON output')
    parser.add_argument('--max-depth', type=int, default=None,
                        help='Maximum multipart nesting depth (default: from environment or 10)')
    parser.add_argument('--log-file', help='Write debug log to specified file')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    config = get_config_from_env()
    if args.max_depth is not None:
        config = replace(config, parsing=replace(config.parsing, max_nested_depth=args.max_depth))
        config.validate()

    log_level = logging.DEBUG if args.debug else getattr(logging, config.logging.level)
    logging.basicConfig(
        level=log_level,
        filename=args.log_file,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    results = []
    for file_path in args.files:
        try:
            with open(file_path, 'rb') as f:
                content = f.read()

            part = MimePart.from_bytes(content, config=config)
            result = summarize_part(part).to_dict()
            result['source'] = file_path
            result['size'] = len(content)
            results.append(result)
            logger.info(f"Parsed {file_path}: {result['content_type'] or 'no content-type'}, "
                        f"{result['part_count']} part(s)")

        except (MimeError, OSError) as e:
            logger.error(f"Error parsing {file_path}: {e}")
            results.append({
                'source': file_path,
                'error': str(e)
            })

    output = {
        'results': results,
        'total_files': len(results),
        'successful': len([r for r in results if 'error' not in r])
    }

    json_str = json.dumps(output, indent=None if args.compact else 2)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(json_str)
        logger.info(f"Results saved to: {args.output}")
    else:
        print(json_str)

    return 0 if output['successful'] == output['total_files'] else 1


if __name__ == "__main__":
    sys.exit(main())
