#!/usr/bin/env python3
"""Profile htmltext extraction and link discovery to find hot spots."""

import cProfile
import io
import pstats

from htmltext import HtmlExtractText, HtmlHyperlinkParser, HtmlUrlFormat

# Sample HTML
html = """
<!DOCTYPE html>
<html>
<head>
    <title>Test &amp; Profile</title>
    <meta name="author" content="Someone">
    <style>p { color: red }</style>
    <script>var logo = "images/logo.png";</script>
</head>
<body>
    <div class="container">
        <p>Paragraph 1 with &copy; and &#960; and AT&T</p>
        <p>Paragraph 2 with x<sup>2</sup> and H<sub>2</sub>O</p>
        <table>
            <tr><td>Cell 1</td><td><a href="../cell2.html">Cell 2</a></td></tr>
            <tr><td>Cell 3</td><td><img src="img/cell4.png"></td></tr>
        </table>
        <font face="Symbol">abg</font>
        <pre>keep
  these lines</pre>
    </div>
</body>
</html>
""" * 100  # Repeat for more meaningful results

# Profile
pr = cProfile.Profile()
pr.enable()

extractor = HtmlExtractText()
for _ in range(10):
    extractor.extract(html)
    fmt = HtmlUrlFormat("http://example.com/docs/index.html")
    for link in HtmlHyperlinkParser(html):
        fmt.resolve(link.url, link.is_image)

pr.disable()

# Print stats
s = io.StringIO()
ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
ps.print_stats(50)  # Top 50 functions
print(s.getvalue())
