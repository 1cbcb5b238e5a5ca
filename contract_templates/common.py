SIGNATURE_FOOTER = """---

**IN WITNESS WHEREOF**, the parties have executed this Agreement as of the date first above written.

**COMPANY:**

By: ${companyContact}

Title: ${companyTitle}

**PRODUCER/MANAGER:**

By: ${producerContact}

Title: ${producerTitle}

---

*This agreement is governed by the laws of the State of California and any disputes shall be resolved through binding arbitration.*"""

# Blank signature line used as the default for signer titles
SIGNATURE_LINE = "___________________________"
