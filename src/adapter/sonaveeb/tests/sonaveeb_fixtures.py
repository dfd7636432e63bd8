"""Trimmed Sõnaveeb pages used by the adapter tests."""

SEARCH_KASS = """
<html><body>
  <ul class="homonym-list">
    <li class="homonym-list-item" data-word-id="158376">
      <span class="homonym-name">kass</span> <span class="homonym-nr">1</span>
    </li>
    <li class="homonym-list-item" data-word-id="401322">
      <span class="homonym-name">kass</span> <span class="homonym-nr">2</span>
    </li>
    <li class="homonym-list-item" data-word-id="158376">duplicate link</li>
  </ul>
</body></html>
"""

SEARCH_NO_RESULTS = """
<html><body>
  <div class="search-no-results">Otsitud sõna ei leitud.</div>
</body></html>
"""

DETAILS_KASS = """
<div class="word-details">
  <div class="word-grammar">
    <span class="pos-tag" title="nimisõna">nimis</span>
    <span class="pos-tag" title="tundmatu">?</span>
  </div>
  <div class="meanings">
    <div class="meaning">
      <span class="definition-value">
        väike   kodune kiskja
      </span>
      <ul>
        <li class="example-text-value">Kass nurrub.</li>
        <li class="example-text-value">Must kass jooksis üle tee.</li>
      </ul>
    </div>
    <div class="meaning">
      <span class="definition-value">kaslaste sugukonda kuuluv loom</span>
    </div>
    <div class="meaning">
      <span class="definition-value"> </span>
    </div>
  </div>
  <table class="morphology-paradigm">
    <tr><td data-morph-code="SgN"><span class="form-value">kass</span></td>
        <td data-morph-code="PlN"><span class="form-value">kassid</span></td></tr>
    <tr><td data-morph-code="SgG"><span class="form-value">kassi</span></td>
        <td data-morph-code="PlG"><span class="form-value">kasside</span></td></tr>
    <tr><td data-morph-code="SgP"><span class="form-value">kassi</span></td>
        <td data-morph-code="PlP"><span class="form-value">kasse</span>
                                  <span class="form-value">kassisid</span></td></tr>
    <tr><td data-morph-code="SgAbl">-</td>
        <td data-morph-code="PlAbl">kassidelt</td></tr>
  </table>
</div>
"""
