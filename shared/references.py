import streamlit as st


class ReferenceList():
    """
    Numbered citations and footnotes for a page.

    Sources are registered up front with add_source() and only get a number the
    first time they're cited, so the list at the bottom follows reading order.
    Footnotes are numbered in the same sequence.
    """

    def __init__(self):
        self.count = 0
        self.items = []     # (number, "source" | "footnote", key or footnote text)
        self.sources = {}   # key -> {"link", "link_title", "ref_number"}

    def add_source(self, key: str, link: str, link_title: str = ""):
        self.sources[key] = {"link": link, "link_title": link_title, "ref_number": None}

    def _number_for(self, key: str):
        source = self.sources.get(key)
        if source is None:
            raise KeyError(f"Unknown reference '{key}'. Register it with add_source() first.")

        if source["ref_number"] is None:
            self.count += 1
            source["ref_number"] = self.count
            self.items.append((self.count, "source", key))
        return source["ref_number"]

    def cite(self, key: str):
        """Superscript link, e.g. [1], for use inside st.markdown(..., unsafe_allow_html=True)."""
        ref_number = self._number_for(key)
        link = self.sources[key]["link"]
        return f"""<span title=""><sup>[{ref_number}]({link})</sup></span>"""

    def source_link(self, key: str):
        """Markdown link using the source's title, for captions."""
        self._number_for(key)
        link = self.sources[key]["link"]
        link_title = self.sources[key]["link_title"] or link
        return f"[{link_title}]({link})"

    def add_footnote(self, footnote: str):
        self.count += 1
        self.items.append((self.count, "footnote", footnote))
        return f"""<span title=""><sup>{self.count}</sup></span>"""

    def to_markdown(self):
        references_markdown = ""

        for ref_number, ref_type, ref_text in self.items:
            if ref_type == "footnote":
                this_ref_text = ref_text
            else:
                source = self.sources[ref_text]
                link_title = source["link_title"] or source["link"]
                this_ref_text = f"[{link_title}]({source['link']})"

            references_markdown += f"- {ref_number}. {this_ref_text} \n"
        return references_markdown

    def spill(self):
        with st.expander("References (click to expand)"):
            st.markdown(self.to_markdown())
