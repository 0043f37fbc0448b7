# editor/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from editor.markdown.preview import count_words, reading_time
from editor.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.filter(name="word_count")
def word_count_filter(value):
    return count_words(value)


@register.filter(name="reading_time")
def reading_time_filter(value):
    """Estimated minutes to read the markdown source"""
    return reading_time(value)
