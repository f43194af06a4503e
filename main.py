from __future__ import annotations
import logging
import os
import sys

from config import RenderConfig
from document import load_image
from errors import SVGError
from renderer import Renderer
from serializer import serialize
from sinks import RasterSink

def process_svg_file(svg_path: str, output_path: str = None, verbose: bool = False,
                     background: tuple[int, int, int] = (255, 255, 255),
                     flip_y: bool = False, emit_code: bool = False,
                     skip_render: bool = False) -> bool:
    if not os.path.exists(svg_path):
        print(f"Error: File not found: {svg_path}")
        return False

    if not svg_path.lower().endswith('.svg'):
        print(f"Warning: {svg_path} does not have .svg extension")

    try:
        image = load_image(svg_path)

        if verbose:
            print(f"\nProcessing: {svg_path}")
            print(f"Size: {image.width}x{image.height}")
            print(f"ViewBox: {image.view_box}")
            print(f"Elements: {len(image.elements)}, colors: {len(image.palette)}")

        if skip_render:
            print(f"[OK] Parsed: {svg_path} (rendering skipped)")
            return True

        if emit_code:
            code = serialize(image, RenderConfig(flip_y=flip_y))
            if output_path is None:
                print(code, end='')
            else:
                with open(output_path, 'w', encoding='utf-8') as file:
                    file.write(code)
                print(f"[OK] {svg_path} -> {output_path}")
            return True

        if output_path is None:
            base_name = os.path.splitext(os.path.basename(svg_path))[0]
            output_path = f"{base_name}.png"

        if verbose:
            print(f"Output will be: {output_path}")
            print(f"Background color: RGB{background}")

        width = max(1, int(round(image.width)))
        height = max(1, int(round(image.height)))
        sink = RasterSink(width, height, background)
        Renderer(image, sink, RenderConfig(flip_y=flip_y, fit_viewbox=True)).render()
        sink.save(output_path)

        if verbose:
            print(f"[OK] Rendered and saved: {output_path}")
        else:
            print(f"[OK] {svg_path} -> {output_path}")
        return True

    except SVGError as e:
        print(f"Error processing {svg_path}: {e}")
        return False
    except OSError as e:
        print(f"Error writing output for {svg_path}: {e}")
        return False

def print_usage():
    print("SVG to shapes converter")
    print("Usage: svg-to-shapes <svg_file1> [svg_file2] ... [options]")
    print("\nOptions:")
    print("  -v, --verbose         Print detailed information")
    print("  -o, --output PATH     Specify output directory or file")
    print("  -b, --background RGB  Background color as R,G,B (default: 255,255,255)")
    print("  --flip-y              Flip the y axis (y-up targets)")
    print("  --code                Emit libGDX ShapeRenderer code instead of a PNG")
    print("  --skip-render         Skip rendering (only parse and validate)")
    print("\nExamples:")
    print("  svg-to-shapes test.svg")
    print("  svg-to-shapes *.svg -o out/ -v")
    print("  svg-to-shapes icon.svg --code --flip-y")

def main(argv: list[str] = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if len(args) == 0:
        print_usage()
        return 1

    verbose = False
    output_dir = None
    background = (255, 255, 255)
    flip_y = False
    emit_code = False
    skip_render = False
    svg_files = []

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ['-v', '--verbose']:
            verbose = True
        elif arg in ['-o', '--output']:
            if i + 1 < len(args):
                output_dir = args[i + 1]
                i += 1
            else:
                print("Error: -o/--output requires a path argument")
                return 1
        elif arg in ['-b', '--background']:
            if i + 1 < len(args):
                try:
                    rgb_parts = args[i + 1].split(',')
                    if len(rgb_parts) != 3:
                        print("Error: Background must be R,G,B (e.g., 255,255,255)")
                        return 1
                    background = tuple(max(0, min(255, int(part.strip()))) for part in rgb_parts)
                except ValueError:
                    print("Error: Background must be R,G,B integers (e.g., 255,255,255)")
                    return 1
                i += 1
            else:
                print("Error: -b/--background requires R,G,B values")
                return 1
        elif arg == '--flip-y':
            flip_y = True
        elif arg == '--code':
            emit_code = True
        elif arg == '--skip-render':
            skip_render = True
        elif arg.startswith('-'):
            print(f"Unknown option: {arg}")
            return 1
        else:
            svg_files.append(arg)
        i += 1

    if len(svg_files) == 0:
        print("Error: No SVG files specified")
        return 1

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    extension = '.java' if emit_code else '.png'
    success_count = 0
    for svg_file in svg_files:
        output_path = None
        if output_dir:
            if os.path.isdir(output_dir):
                base_name = os.path.splitext(os.path.basename(svg_file))[0]
                output_path = os.path.join(output_dir, f"{base_name}{extension}")
            elif len(svg_files) == 1:
                output_path = output_dir
            else:
                print("Warning: -o with multiple files requires a directory, not a file")

        if process_svg_file(svg_file, output_path, verbose, background, flip_y, emit_code, skip_render):
            success_count += 1

    print(f"\nProcessed {success_count}/{len(svg_files)} file(s) successfully")
    return len(svg_files) - success_count

if __name__ == "__main__":
    sys.exit(main())
