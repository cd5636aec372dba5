"""
GraphQL mutation strings for Shopify Admin API.
"""


# Create a product with its options; Shopify adds one default variant
PRODUCT_CREATE = '''
mutation createProduct($input: ProductInput!, $media: [CreateMediaInput!]) {
  productCreate(input: $input, media: $media) {
    product {
      id
      title
      status
      options {
        id
        name
        values
        optionValues {
          id
          name
        }
      }
      variants(first: 5) {
        edges {
          node {
            id
            selectedOptions {
              name
              value
            }
            inventoryItem {
              id
            }
          }
        }
      }
    }
    shop {
      locations(first: 5) {
        nodes {
          id
          name
          isActive
          isPrimary
        }
      }
    }
    userErrors {
      field
      message
    }
  }
}
'''

PRODUCT_VARIANTS_BULK_CREATE = '''
mutation productVariantsBulkCreate($productId: ID!, $variants: [ProductVariantsBulkInput!]!) {
  productVariantsBulkCreate(productId: $productId, variants: $variants) {
    productVariants {
      id
      title
    }
    userErrors {
      field
      message
    }
  }
}
'''

PRODUCT_VARIANTS_BULK_UPDATE = '''
mutation productVariantsBulkUpdate($productId: ID!, $variants: [ProductVariantsBulkInput!]!) {
  productVariantsBulkUpdate(productId: $productId, variants: $variants) {
    product {
      id
      title
    }
    userErrors {
      field
      message
    }
  }
}
'''

INVENTORY_SET_QUANTITIES = '''
mutation inventorySetQuantities($input: InventorySetQuantitiesInput!) {
  inventorySetQuantities(input: $input) {
    inventoryAdjustmentGroup {
      createdAt
      reason
      changes {
        name
        delta
      }
    }
    userErrors {
      field
      message
    }
  }
}
'''

# Only used to clean up after a failed creation
PRODUCT_DELETE = '''
mutation productDelete($input: ProductDeleteInput!) {
  productDelete(input: $input) {
    deletedProductId
    userErrors {
      field
      message
    }
  }
}
'''
