"""VM inventory table with sortable headers and page controls."""

from typing import Optional

import streamlit as st

from config.config_loader import get_table_config
from src.inventory.loader import records_to_dataframe
from src.inventory.pipeline import InventoryView
from src.inventory.sorting import COLUMN_LABELS, SortColumn, SortDirection, toggle_sort

from .state import get_filter_store, get_sort_spec, set_sort_spec


def _on_header_click(column: SortColumn) -> None:
    set_sort_spec(toggle_sort(get_sort_spec(), column))


def _header_label(column: SortColumn) -> str:
    label = COLUMN_LABELS[column]
    spec = get_sort_spec()
    if spec is None or spec.column is not column:
        return label
    return f"{label} {'▲' if spec.direction is SortDirection.ASC else '▼'}"


def render_sort_headers(key: str = "vm_sort") -> None:
    """Render one button per column; clicking toggles the sort."""
    cols = st.columns(len(COLUMN_LABELS))
    for col, column in zip(cols, COLUMN_LABELS):
        with col:
            st.button(
                _header_label(column),
                key=f"{key}_{column.value}",
                type="tertiary",
                on_click=_on_header_click,
                args=(column,),
            )


def render_pagination_controls(view: InventoryView, key: str = "vm_pagination") -> None:
    """
    Render pagination controls using Streamlit.

    Args:
        view: Current view; supplies page state and total count.
        key: Unique key for this pagination instance
    """
    store = get_filter_store()
    state = view.page_state
    total = view.total_count

    info_col, nav_col, size_col = st.columns([2, 2, 1])

    with info_col:
        st.markdown(f"**{state.get_display_range(total)}**")

    with nav_col:
        btn_cols = st.columns([1, 1, 2, 1, 1])

        with btn_cols[0]:
            st.button("⏮", key=f"{key}_first", disabled=not state.has_previous(),
                      on_click=store.set_page, args=(1,))

        with btn_cols[1]:
            st.button("◀", key=f"{key}_prev", disabled=not state.has_previous(),
                      on_click=store.set_page, args=(state.page - 1,))

        with btn_cols[2]:
            st.markdown(
                f"<div style='text-align: center; padding-top: 8px;'>"
                f"Page {state.page} of {view.total_pages}</div>",
                unsafe_allow_html=True
            )

        with btn_cols[3]:
            st.button("▶", key=f"{key}_next", disabled=not state.has_next(total),
                      on_click=store.set_page, args=(state.page + 1,))

        with btn_cols[4]:
            st.button("⏭", key=f"{key}_last", disabled=not state.has_next(total),
                      on_click=store.set_page, args=(view.total_pages,))

    with size_col:
        page_sizes = get_table_config().page_size_options
        current_idx = page_sizes.index(state.page_size) if state.page_size in page_sizes else 0
        new_size = st.selectbox(
            "Per page",
            options=page_sizes,
            index=current_idx,
            key=f"{key}_page_size",
            label_visibility="collapsed",
        )
        if new_size != state.page_size:
            store.set_page_size(new_size)
            st.rerun()


def render_vm_table(view: InventoryView, key: str = "vm_table") -> Optional[str]:
    """
    Render the current page of VMs.

    Args:
        view: Output of build_view.
        key: Unique key prefix for widgets.

    Returns:
        ID of the clicked VM, or None.
    """
    if view.loading:
        st.caption("Loading inventory...")
        return None

    render_sort_headers(key=f"{key}_sort")

    if view.total_count == 0:
        st.info("No VMs match the applied filters.")
        return None

    df = records_to_dataframe(view.rows)
    event = st.dataframe(
        df,
        use_container_width=True,
        hide_index=True,
        on_select="rerun",
        selection_mode="single-row",
        key=f"{key}_rows",
    )

    render_pagination_controls(view, key=f"{key}_pagination")

    selected = event.selection.rows if event is not None else []
    if selected and selected[0] < len(view.rows):
        return view.rows[selected[0]].id
    return None
