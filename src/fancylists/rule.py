"""Fancy list block rule for markdown-it-py.

Replaces markdown-it's "list" rule. The rule recognizes the first marker,
opens a list block, then consumes item after item while the next line
carries a compatible marker:

    1) First        <- opens an Arabic list
    A) Again        <- incompatible: closes it, opens an upper alpha list
    i) Another      <- incompatible again: opens a lower Roman list
    ii) Second      <- compatible: second item of the Roman list

Item content is parsed by the host block tokenizer with the host state
temporarily re-indented for the item (see borrow_item_state).

Thread Safety:
The rule closure holds only the immutable config. All parse state lives on
the StateBlock passed in by the host.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from markdown_it.rules_block import StateBlock

from fancylists.config import DEFAULT_CONFIG, FancyListsConfig
from fancylists.indent import measure_item_indent
from fancylists.marker import analyze_marker, are_markers_compatible
from fancylists.numerals import format_ordinal
from fancylists.types import ItemGeometry, Marker
from fancylists.utils.logger import get_logger

logger = get_logger(__name__)

BlockRule = Callable[[StateBlock, int, int, bool], bool]


def _analyze_state_line(
    state: StateBlock,
    line: int,
    previous: Marker | None,
    config: FancyListsConfig,
) -> Marker | None:
    pos = state.bMarks[line] + state.tShift[line]
    return analyze_marker(state.src, pos, state.eMarks[line], previous, config)


@contextmanager
def borrow_item_state(
    state: StateBlock, line: int, geometry: ItemGeometry
) -> Iterator[StateBlock]:
    """Re-indent the host state for parsing one item's content.

    Inside the block the item's first line starts at its content, the block
    indent is the item indent and the list indent is the enclosing block
    indent:

        - example list
       ^ listIndent
         ^ blkIndent

    Everything is restored on exit, exceptions included.

    Yields:
        The same StateBlock, prepared for the item

    """
    old_tight = state.tight
    old_t_shift = state.tShift[line]
    old_s_count = state.sCount[line]
    old_list_indent = state.listIndent
    old_blk_indent = state.blkIndent

    state.listIndent = state.blkIndent
    state.blkIndent = geometry.indent
    state.tight = True
    state.tShift[line] = geometry.content_start - state.bMarks[line]
    state.sCount[line] = geometry.offset
    try:
        yield state
    finally:
        state.blkIndent = old_blk_indent
        state.listIndent = old_list_indent
        state.tShift[line] = old_t_shift
        state.sCount[line] = old_s_count
        state.tight = old_tight


def mark_tight_paragraphs(state: StateBlock, idx: int) -> None:
    """Hide the paragraph tokens directly inside the list opened at idx."""
    level = state.level + 2
    i = idx + 2
    length = len(state.tokens) - 2
    while i < length:
        if state.tokens[i].level == level and state.tokens[i].type == "paragraph_open":
            state.tokens[i + 2].hidden = True
            state.tokens[i].hidden = True
            i += 2
        i += 1


def _assemble_list(
    state: StateBlock,
    start_line: int,
    end_line: int,
    marker: Marker,
    config: FancyListsConfig,
) -> None:
    numbering = marker.numbering
    start_value = marker.ordinal
    markup = marker.markup
    list_tok_idx = len(state.tokens)

    if marker.is_ordered:
        token = state.push("ordered_list_open", "ol", 1)
        if numbering.html_type is not None:
            token.attrSet("type", numbering.html_type)
        if start_value != 1:
            token.attrSet("start", str(start_value))
        if marker.has_ordinal_indicator:
            token.attrSet("class", "ordinal")
        token.meta = {"numbering": numbering}
    else:
        token = state.push("bullet_list_open", "ul", 1)

    token.map = list_lines = [start_line, 0]
    token.markup = markup

    next_line = start_line
    prev_empty_end = False
    tight = True
    position = 0
    terminator_rules = state.md.block.ruler.getRules("list")

    old_parent_type = state.parentType
    state.parentType = "list"
    try:
        item_marker: Marker | None = marker
        while item_marker is not None:
            item_start = next_line
            max_pos = state.eMarks[item_start]
            line_start = state.bMarks[item_start] + state.tShift[item_start]
            initial = state.sCount[item_start] + item_marker.pos_after_marker - line_start
            geometry = measure_item_indent(
                state.src,
                item_marker.pos_after_marker,
                max_pos,
                initial,
                state.bsCount[item_start],
            )

            token = state.push("list_item_open", "li", 1)
            token.markup = markup
            token.map = item_lines = [item_start, 0]
            if item_marker.is_ordered:
                ordinal = start_value + position
                token.info = item_marker.raw
                token.meta = {"ordinal": ordinal, "label": format_ordinal(ordinal, numbering)}

            with borrow_item_state(state, item_start, geometry):
                if geometry.content_start >= max_pos and state.isEmpty(item_start + 1):
                    # Empty item followed by a blank line ends the list:
                    #   -
                    #
                    #     foo
                    state.line = min(state.line + 2, end_line)
                else:
                    state.md.block.tokenize(state, item_start, end_line)
                item_tight = state.tight

            if not item_tight or prev_empty_end:
                tight = False
            # Trailing blank lines of the last item belong to what follows
            prev_empty_end = (state.line - item_start) > 1 and state.isEmpty(state.line - 1)

            token = state.push("list_item_close", "li", -1)
            token.markup = markup

            next_line = state.line
            item_lines[1] = next_line
            position += 1

            if next_line >= end_line:
                break
            if state.sCount[next_line] < state.blkIndent:
                break
            if state.is_code_block(next_line):
                break
            if any(rule(state, next_line, end_line, True) for rule in terminator_rules):
                break

            # The last accepted marker is the context, a wildcard included
            previous = item_marker
            item_marker = _analyze_state_line(state, next_line, previous, config)
            if item_marker is not None and not are_markers_compatible(previous, item_marker):
                item_marker = None
    finally:
        state.parentType = old_parent_type

    token = state.push(
        "ordered_list_close" if marker.is_ordered else "bullet_list_close",
        "ol" if marker.is_ordered else "ul",
        -1,
    )
    token.markup = markup

    list_lines[1] = next_line
    state.line = next_line

    if tight:
        mark_tight_paragraphs(state, list_tok_idx)

    logger.debug(
        "Assembled %s list: %d item(s), lines %d-%d, tight=%s",
        numbering.name,
        position,
        start_line,
        next_line,
        tight,
    )


def make_fancy_list_rule(config: FancyListsConfig = DEFAULT_CONFIG) -> BlockRule:
    """Build the block rule for a configuration.

    Args:
        config: Which optional marker forms are recognized

    Returns:
        A markdown-it block rule with the (state, startLine, endLine, silent)
        signature

    """

    def fancy_list(state: StateBlock, startLine: int, endLine: int, silent: bool) -> bool:
        # if it's indented more than 3 spaces, it should be a code block
        if state.is_code_block(startLine):
            return False

        # Special case:
        #  - item 1
        #   - item 2
        #    - item 3
        #     - item 4
        #      - this one is a paragraph continuation
        if (
            state.listIndent >= 0
            and state.sCount[startLine] - state.listIndent >= 4
            and state.sCount[startLine] < state.blkIndent
        ):
            return False

        # Validation mode only: can this line interrupt a paragraph?
        is_terminating_paragraph = (
            silent
            and state.parentType == "paragraph"
            and state.sCount[startLine] >= state.blkIndent
        )

        marker = _analyze_state_line(state, startLine, None, config)
        if marker is None:
            return False

        if is_terminating_paragraph:
            # Only a first-looking marker may interrupt a paragraph outside a list
            if marker.ordinal != 1 and state.listIndent == -1:
                return False
            if state.skipSpaces(marker.pos_after_marker) >= state.eMarks[startLine]:
                return False

        if silent:
            return True

        _assemble_list(state, startLine, endLine, marker, config)
        return True

    return fancy_list
