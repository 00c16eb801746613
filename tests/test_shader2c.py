from gammaray.shader2c import (
    HELP,
    VERSION,
    Shader2cOptions,
    main,
    parse_args,
    render_class,
    write_shader_bytes,
)

FULL_ARGS = [
    "--in=in.glsl",
    "--out=out.h",
    "--class=Default",
    "--inherits=RendererShaderOpenGL3",
    "--inheritshpath=Drivers/OpenGL3/RendererShaderOpenGL3.h",
]


def test_parse_args_all_fields():
    options = parse_args(FULL_ARGS)
    assert options.in_file_path == "in.glsl"
    assert options.out_file_path == "out.h"
    assert options.class_name == "Default"
    assert options.inherits_class_name == "RendererShaderOpenGL3"
    assert options.inherits_header_path == "Drivers/OpenGL3/RendererShaderOpenGL3.h"
    assert options.is_complete()


def test_parse_args_value_stops_at_next_equals():
    assert parse_args(["--in=a=b"]).in_file_path == "a"


def test_parse_args_unknown_key_ignored():
    assert parse_args(["--foo=bar"]) == Shader2cOptions()


def test_parse_args_version_stops():
    options = parse_args(["--in=x", "-v", "--out=y"])
    assert options.show_version
    assert options.out_file_path == ""


def test_incomplete_options():
    assert not parse_args(FULL_ARGS[:-1]).is_complete()


def test_write_shader_bytes_exact():
    assert write_shader_bytes("AB", "_v") == (
        "        static const char _v[] = {\n            65, 66, \n        };"
    )


def test_write_shader_bytes_signed_for_high_bytes():
    out = write_shader_bytes("\u00e9", "_v")
    assert "-61, -87, " in out


def test_write_shader_bytes_wraps_every_24():
    out = write_shader_bytes("a" * 48, "_v")
    assert out.count("97, ") == 48
    assert out.count("97, \n            ") == 2


def test_render_class_structure():
    options = parse_args(FULL_ARGS)
    text = render_class(options, "v\n", "f\n")
    assert '#include "Drivers/OpenGL3/RendererShaderOpenGL3.h"' in text
    assert "class RendererShaderDefault : public RendererShaderOpenGL3\n{\n" in text
    assert 'Setup(_vertexSource, _fragmentSource, nullptr, "Default");' in text
    assert text.index("_vertexSource[]") < text.index("_fragmentSource[]")
    assert text.endswith("};")


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out == VERSION


def test_main_help_when_incomplete(capsys):
    assert main(["--in=x"]) == 0
    assert capsys.readouterr().out == HELP


def test_main_writes_file(tmp_path):
    src = tmp_path / "s.glsl"
    src.write_text("#[vertex]\nA\n#[fragment]\nB\n", encoding="utf-8")
    out = tmp_path / "s.gen.h"
    args = [
        f"--in={src}",
        f"--out={out}",
        "--class=Test",
        "--inherits=Base",
        "--inheritshpath=base.h",
    ]
    assert main(args) == 0
    options = parse_args(args)
    assert out.read_text(encoding="utf-8") == render_class(options, "A\n", "B\n")