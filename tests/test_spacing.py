from codesort.language import Language
from codesort.loc_list import LocList
from codesort.spacing import Spacing

ENUM_INPUT = """
pub enum Animal {
    #[doc = "z"]
    Zebra,

    #[doc = "c"]
    Cat(u8),

    #[doc = "b"]
    Bee { legs: u8 },
}
"""

ENUM_OUTPUT = """
pub enum Animal {
    #[doc = "b"]
    Bee { legs: u8 },

    #[doc = "c"]
    Cat(u8),

    #[doc = "z"]
    Zebra,
}
"""

STRUCT_INPUT = """
/// Settings
#[derive(Debug)]
pub struct Settings {

    #[serde(alias="zoom-level")]
    pub zoom_level: Option<u8>, // trailing comment

    pub alpha: bool,

    /// the mode
    #[serde(alias="mode")]
    pub mode: Option<Mode>,
}
"""

STRUCT_OUTPUT = """
/// Settings
#[derive(Debug)]
pub struct Settings {

    pub alpha: bool,

    /// the mode
    #[serde(alias="mode")]
    pub mode: Option<Mode>,

    #[serde(alias="zoom-level")]
    pub zoom_level: Option<u8>, // trailing comment
}
"""

TRAIT_INPUT = """
/// a shape
pub trait Shape {

    fn name(&self) -> String;

    /// area of the shape
    fn area(&self) -> f64 {
        0.0
    }

    fn scale(
        &mut self,
        factor: f64,
    ) -> Result<(), Error>;

    #[allow(unused)]
    fn draw(&self, canvas: &mut Canvas) {}

}
"""

TRAIT_OUTPUT = """
/// a shape
pub trait Shape {

    /// area of the shape
    fn area(&self) -> f64 {
        0.0
    }

    #[allow(unused)]
    fn draw(&self, canvas: &mut Canvas) {}

    fn name(&self) -> String;

    fn scale(
        &mut self,
        factor: f64,
    ) -> Result<(), Error>;

}
"""


def test_restore_spacing_between():
    focused = LocList.read_str(ENUM_INPUT, Language.RUST).focus_around_line_index(2)
    blocks = focused.focus.into_blocks()
    assert len(blocks) == 3
    spacing = Spacing.recognize(blocks)
    assert spacing is Spacing.BETWEEN

    blocks.sort()
    assert Spacing.recognize(blocks) is Spacing.OTHER

    spacing.apply(blocks)
    assert Spacing.recognize(blocks) is Spacing.BETWEEN

    assert str(focused.sort()) == ENUM_OUTPUT


def test_struct_fields():
    focused = LocList.read_str(STRUCT_INPUT, Language.RUST).focus_around_line_index(5)
    assert str(focused.sort()) == STRUCT_OUTPUT


def test_trait_functions():
    focused = LocList.read_str(TRAIT_INPUT, Language.RUST).focus_around_line_index(4)
    assert str(focused.sort()) == TRAIT_OUTPUT


def test_recognize_no_blocks():
    assert Spacing.recognize([]) is Spacing.OTHER


def test_recognize_blank_before_first_block():
    blocks = LocList.read_str("\na;\n\nb;\n", Language.RUST).into_blocks()
    assert Spacing.recognize(blocks) is Spacing.OTHER


def test_recognize_without_blank_lines():
    blocks = LocList.read_str("a;\nb;\n", Language.RUST).into_blocks()
    assert len(blocks) == 2
    assert Spacing.recognize(blocks) is Spacing.OTHER


def test_apply_other_leaves_blocks():
    blocks = LocList.read_str("\nb;\na;\n", Language.RUST).into_blocks()
    before = [str(block) for block in blocks]
    Spacing.OTHER.apply(blocks)
    assert [str(block) for block in blocks] == before


def test_apply_between_moves_blank_lines():
    blocks = LocList.read_str("b;\n\na;\n", Language.RUST).into_blocks()
    assert Spacing.recognize(blocks) is Spacing.BETWEEN
    blocks.sort()
    Spacing.BETWEEN.apply(blocks)
    assert "".join(str(block) for block in blocks) == "a;\n\nb;\n"