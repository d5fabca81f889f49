"""Static CSS emitted around the per-document styles."""

from __future__ import annotations

BASE_STYLESHEET = """/* Block base styles */
.wp-block {
    margin-bottom: 1.5em;
    clear: both;
}
.wp-block:last-child {
    margin-bottom: 0;
}
.alignleft { float: left; margin-right: 1em; }
.alignright { float: right; margin-left: 1em; }
.aligncenter { margin-left: auto; margin-right: auto; text-align: center; }
.alignwide { max-width: 1100px; margin-left: auto; margin-right: auto; }
.alignfull { max-width: none; width: 100%; }
.has-text-align-left { text-align: left; }
.has-text-align-center { text-align: center; }
.has-text-align-right { text-align: right; }

/* Paragraph */
.wp-block-paragraph {
    margin-top: 0;
    margin-bottom: 1em;
}
.wp-block-paragraph.has-drop-cap::first-letter {
    float: left;
    font-size: 3em;
    line-height: 1;
    margin: 0.1em 0.1em 0 0;
    font-weight: bold;
}

/* Heading */
.wp-block-heading {
    margin-top: 1em;
    margin-bottom: 0.75em;
}

/* List, quote, code, preformatted, verse */
.wp-block-list { padding-left: 1.5em; }
.wp-block-quote {
    border-left: 4px solid currentColor;
    margin: 0 0 1em;
    padding-left: 1em;
}
.wp-block-quote cite { display: block; font-size: 0.875em; font-style: normal; }
.wp-block-code, .wp-block-preformatted {
    overflow: auto;
    white-space: pre;
    font-family: monospace;
    padding: 0.8em 1em;
}
.wp-block-verse { white-space: pre-wrap; font-family: inherit; }

/* Image, gallery, audio, video, file */
.wp-block-image { margin: 0 0 1em; }
.wp-block-image img { max-width: 100%; height: auto; vertical-align: bottom; }
.wp-block-image figcaption { margin-top: 0.5em; font-size: 0.875em; text-align: center; }
.wp-block-gallery {
    display: flex;
    flex-wrap: wrap;
    gap: 0.5em;
    list-style: none;
    padding: 0;
}
.wp-block-gallery > figure { flex-grow: 1; margin: 0; }
.wp-block-gallery.columns-1 > figure { width: 100%; }
.wp-block-gallery.columns-2 > figure { width: calc(50% - 0.5em); }
.wp-block-gallery.columns-3 > figure { width: calc(33.333% - 0.5em); }
.wp-block-gallery.columns-4 > figure { width: calc(25% - 0.5em); }
.wp-block-gallery.is-cropped img { width: 100%; height: 100%; object-fit: cover; }
.wp-block-audio audio, .wp-block-video video { width: 100%; }
.wp-block-file { display: flex; align-items: center; gap: 0.75em; }
.wp-block-file__button { padding: 0.5em 1em; border-radius: 2em; }

/* Group, columns, cover, spacer, separator */
.wp-block-group { box-sizing: border-box; }
.wp-block-columns {
    display: flex;
    flex-wrap: nowrap;
    gap: 2em;
    margin-bottom: 1.75em;
}
.wp-block-columns.are-vertically-aligned-top { align-items: flex-start; }
.wp-block-columns.are-vertically-aligned-center { align-items: center; }
.wp-block-columns.are-vertically-aligned-bottom { align-items: flex-end; }
.wp-block-column { flex: 1 1 0; min-width: 0; }
.wp-block-column.is-vertically-aligned-center { align-self: center; }
.wp-block-cover {
    position: relative;
    display: flex;
    align-items: center;
    justify-content: center;
    min-height: 430px;
    padding: 1em;
    background-size: cover;
    background-position: center;
}
.wp-block-cover.has-parallax { background-attachment: fixed; }
.wp-block-cover.is-repeated { background-repeat: repeat; background-size: auto; }
.wp-block-cover.has-background-dim::before {
    content: "";
    position: absolute;
    inset: 0;
    background-color: inherit;
    opacity: 0.5;
}
.wp-block-spacer { clear: both; }
.wp-block-separator { border: none; border-top: 2px solid; margin: 1.65em auto; }
.wp-block-separator:not(.is-style-wide):not(.is-style-dots) { max-width: 100px; }
.wp-block-separator.is-style-dots { border: none; text-align: center; }
.wp-block-separator.is-style-dots::before { content: "\\00b7 \\00b7 \\00b7"; letter-spacing: 2em; }

/* Buttons, social links, navigation, search */
.wp-block-buttons { display: flex; flex-wrap: wrap; gap: 0.5em; }
.wp-block-buttons.is-vertical { flex-direction: column; }
.wp-block-buttons.is-content-justification-center { justify-content: center; }
.wp-block-buttons.is-content-justification-right { justify-content: flex-end; }
.wp-block-buttons.is-content-justification-space-between { justify-content: space-between; }
.wp-block-button__link {
    display: inline-block;
    padding: 0.667em 1.333em;
    border-radius: 9999px;
    text-decoration: none;
    cursor: pointer;
}
.wp-block-social-links { display: flex; flex-wrap: wrap; gap: 0.5em; padding: 0; list-style: none; }
.wp-block-navigation { display: flex; flex-wrap: wrap; gap: 1em; }
.wp-block-navigation.is-vertical { flex-direction: column; }
.wp-block-search { display: flex; flex-direction: column; }
.wp-block-search__button-outside .wp-block-search__inside-wrapper { display: flex; gap: 0.5em; }

/* Embeds */
.wp-block-embed { margin: 0 0 1em; }
.wp-block-embed__wrapper { position: relative; }
.wp-block-embed.is-type-video .wp-block-embed__wrapper::before { content: ""; display: block; padding-top: 56.25%; }
.wp-block-embed.is-type-video iframe { position: absolute; inset: 0; width: 100%; height: 100%; }

/* Table, calendar */
.wp-block-table { overflow-x: auto; }
.wp-block-table table { border-collapse: collapse; width: 100%; }
.wp-block-table td, .wp-block-table th { border: 1px solid; padding: 0.5em; }
.wp-block-table.has-fixed-layout table { table-layout: fixed; }
.wp-block-calendar table { width: 100%; border-collapse: collapse; }

/* Testimonial */
.wp-block-testimonial { padding: 1.5em; border-width: 1px; }
.wp-block-testimonial.border-solid { border-style: solid; }
.wp-block-testimonial.border-dashed { border-style: dashed; }
.wp-block-testimonial.border-none { border-style: none; }
.wp-block-testimonial__stars { letter-spacing: 0.1em; color: #f5a623; }
"""

RESPONSIVE_STYLESHEET = """/* Responsive layout */
@media (max-width: 781px) {
    .wp-block-columns.is-stacked-on-mobile { flex-wrap: wrap; }
    .wp-block-columns.is-stacked-on-mobile > .wp-block-column { flex-basis: 100% !important; }
    .wp-block-gallery > figure { width: calc(50% - 0.5em); }
    .wp-block-cover.has-parallax { background-attachment: scroll; }
}
@media (max-width: 480px) {
    .wp-block-gallery > figure { width: 100%; }
    .alignleft, .alignright { float: none; margin-left: 0; margin-right: 0; }
    .wp-block-file { flex-direction: column; align-items: flex-start; }
}
"""

__all__ = ["BASE_STYLESHEET", "RESPONSIVE_STYLESHEET"]
