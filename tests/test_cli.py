from jscompiler.cli import SAMPLE_SOURCE, compile_source, main
from jscompiler.generator import CARGO_TOML, CodeGenerator
from jscompiler.lexer import tokenize
from jscompiler.parser import parse


def test_compile_source_writes_crate(tmp_path):
    source = 'let nome: string = "João";\nconsole.log(nome);'
    main_path = compile_source(source, tmp_path)
    assert main_path == tmp_path / "src" / "main.rs"
    expected = CodeGenerator(tmp_path).render(parse(tokenize(source)))
    assert main_path.read_text(encoding="utf-8") == expected
    assert (tmp_path / "Cargo.toml").read_text(encoding="utf-8") == CARGO_TOML


def test_compile_empty_source(tmp_path):
    main_path = compile_source("", tmp_path / "empty")
    assert main_path.read_text(encoding="utf-8") == "fn main() {\n}\n"


def test_main_compiles_input_file(tmp_path, capsys):
    script = tmp_path / "script.ts"
    script.write_text("let x: number = 1;", encoding="utf-8")
    out_dir = tmp_path / "crate"
    assert main([str(script), "--output", str(out_dir)]) == 0
    code = (out_dir / "src" / "main.rs").read_text(encoding="utf-8")
    expected = CodeGenerator(out_dir).render(parse(tokenize("let x: number = 1;")))
    assert code == expected
    assert str(out_dir / "src" / "main.rs") in capsys.readouterr().out


def test_main_missing_input_fails(tmp_path, capsys):
    status = main([str(tmp_path / "absent.ts"), "-o", str(tmp_path / "crate")])
    assert status == 1
    assert "error" in capsys.readouterr().err
    assert not (tmp_path / "crate").exists()


def test_main_output_is_a_file_fails(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    assert main(["-o", str(blocker)]) == 1